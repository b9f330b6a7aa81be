"""
retreat: find meditation courses on dhamma.org whose enrollment has not opened yet.
"""
