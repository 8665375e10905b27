"""Tests for natural_order"""
