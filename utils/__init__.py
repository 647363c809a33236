"""
utils - Логирование, ошибки и мониторинг решателя.
"""
