"""Complaint Desk service package.

Multi-tenant complaint and ticket management: organizations register,
employees file tickets, supervisors and admins resolve them, and everyone
involved is kept informed through in-app notifications and tenant email.
"""
