"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass

from core.board import TriangleBoard, Move
from utils.logging import get_logger
from utils.monitoring import get_monitor


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    backtracks: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Backtracks: {self.backtracks}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()
        self.monitor = get_monitor()

    @abstractmethod
    def solve(self, board: TriangleBoard) -> Optional[List[Move]]:
        """
        Решает головоломку.

        Args:
            board: начальная позиция (не изменяется)

        Returns:
            Список ходов от начала к концу, [] если доска уже решена,
            None если решения нет
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог: INFO если verbose=True, иначе DEBUG."""
        text = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            self.logger.info(text)
        else:
            self.logger.debug(text)
