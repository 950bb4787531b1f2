"""Servicios del Core: orquestación del envío y sesión de pedido."""
