"""Toolkit-independent layout engine"""
