"""
solutions - Проверка найденных решений.
"""

from .verify import verify_solution

__all__ = [
    'verify_solution',
]
