"""Adaptadores de I/O: HTTP (httpx) y portapapeles (OSC 52)."""
