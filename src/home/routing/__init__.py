"""Routing: ordered route table with exact and prefix matching.

Registration order is dispatch priority. Routes never reorder.
"""
