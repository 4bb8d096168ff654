"""Application Use Cases"""
