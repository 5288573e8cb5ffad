"""Ürün kataloğu bakım API'si."""
