"""
Adaptateurs (couche infrastructure).

Implémentations concrètes des ports définis dans core/ports/.
"""
