"""
utils/monitoring.py

Мониторинг производительности.
"""

import time
from typing import Dict, List, Any, Optional
from collections import defaultdict
from functools import wraps


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        self.metrics[operation].append(elapsed)

    def increment_counter(self, counter: str, value: int = 1):
        """
        Увеличивает счётчик.

        Args:
            counter: имя счётчика
            value: значение для увеличения
        """
        self.counters[counter] += value

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Возвращает статистику.

        Args:
            operation: имя операции (если None, возвращает общую статистику)

        Returns:
            Словарь со статистикой
        """
        if operation:
            if operation not in self.metrics:
                return {}

            times = self.metrics[operation]
            return {
                'operation': operation,
                'count': len(times),
                'total': sum(times),
                'average': sum(times) / len(times),
                'min': min(times),
                'max': max(times),
                'last': times[-1],
            }

        stats = {
            'operations': {},
            'counters': dict(self.counters),
            'total_operations': sum(len(times) for times in self.metrics.values())
        }
        for op in self.metrics:
            stats['operations'][op] = self.get_stats(op)
        return stats

    def format_stats(self) -> str:
        """Сводка по всем операциям и счётчикам для вывода в консоль."""
        stats = self.get_stats()
        lines = ["Monitor:"]
        for op, op_stats in stats['operations'].items():
            lines.append(
                f"  {op}: {op_stats['count']} call(s), "
                f"total {op_stats['total']:.3f}s"
            )
        for counter, value in stats['counters'].items():
            lines.append(f"  {counter}: {value}")
        return "\n".join(lines)

    def reset(self):
        """Сбрасывает все метрики."""
        self.metrics.clear()
        self.counters.clear()


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для мониторинга времени выполнения.

    Usage:
        @monitor_time('solve')
        def solve(...):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.time() - start)
                raise
            monitor.record_time(operation, time.time() - start)
            return result
        return wrapper
    return decorator
