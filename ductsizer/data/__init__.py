"""Packaged duct reference tables"""
