"""
Constantes compartilhadas.
"""

# Maior valor de uma coluna bigint no Postgres (ids das tabelas)
ID_MAXIMO = 2**63 - 1
