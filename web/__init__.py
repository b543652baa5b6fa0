"""
web - Flask API для решателя.
"""
