"""Application composition layer for the Tkinter GUI.

The controller in this package wires views, view models, adapters, and use
cases into a runnable desktop workflow without placing logic in views.
"""
