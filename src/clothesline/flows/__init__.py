"""Prefect flows.

- refresh.py: aggregate weather for one position and write the static page
"""
