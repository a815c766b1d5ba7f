"""
Dash front end: layout builders and callback registration.
"""
