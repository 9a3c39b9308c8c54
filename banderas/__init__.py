"""
Cuerpo de Banderas content service.

HTTP API and persistence for the public site and admin panel of the honor
guard: site settings, leadership rosters, history, shields and galleries.
"""

__version__ = "1.0.0"
