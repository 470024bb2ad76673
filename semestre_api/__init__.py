"""Grading API for Semestre Filtro"""
