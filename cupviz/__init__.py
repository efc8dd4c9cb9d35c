"""Layered drink visualization for the cafe ordering UI"""
