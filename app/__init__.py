"""Salon booking and management API"""
