"""
solvers - Решатели треугольной головоломки

Экспортирует:
- BaseSolver, SolverStats: общий интерфейс и статистика
- BacktrackingSolver: полный перебор с возвратом
"""

from .base import BaseSolver, SolverStats
from .backtracking import BacktrackingSolver

__all__ = [
    'BaseSolver',
    'SolverStats',
    'BacktrackingSolver',
]
