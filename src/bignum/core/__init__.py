"""
Core: числовые примитивы, конфигурация, ошибки и logging.

Не зависит от RSA слоя и любого I/O.
"""
