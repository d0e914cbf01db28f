"""
Creational design pattern demos: Abstract Factory and Factory Method.
"""

__version__ = "1.0.0"
