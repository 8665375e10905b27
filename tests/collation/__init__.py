"""Tests for natural_order.collation"""
