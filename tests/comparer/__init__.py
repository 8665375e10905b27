"""Tests for natural_order.comparer"""
