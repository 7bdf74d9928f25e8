"""
Password Encoding Package

This package converts passwords into bytes using a configured charset.
"""

from .charset import PasswordEncoder, get_encoder

__all__ = ['PasswordEncoder', 'get_encoder']
