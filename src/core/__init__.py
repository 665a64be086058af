"""
Core — доменные модели, численные примитивы и разбор текста экрана.

Модули не зависят от внешних систем (UI, хранилище состояния, locale хоста):
разделители и тексты ошибок передаются явно.
"""
