"""Configuration Tests"""
