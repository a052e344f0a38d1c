"""Geometry model, EWKB binary codec and text helpers"""
