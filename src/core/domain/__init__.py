"""Modelos y reglas del dominio.

El dominio no conoce HTTP, CLI ni portapapeles: solo entradas, modos y
estados de la petición.
"""
