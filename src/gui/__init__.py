"""Interfaz PyQt6 de la calculadora de molaridad."""
