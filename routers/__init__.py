# __init__.py
"""
Routers del servidor de firmas.
main.py los registra con app.include_router(...).
"""
