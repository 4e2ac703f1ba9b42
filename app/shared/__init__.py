"""Helpers shared across domain packages"""
