"""Tests for natural_order.error"""
