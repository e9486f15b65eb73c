"""工具模块"""
from .sampling import sample, find_roots

__all__ = ['sample', 'find_roots']
