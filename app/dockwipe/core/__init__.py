"""Core orchestration for dockwipe.

Configuration, paths, theme, confirmation, preflight, service lifecycle,
update dispatch and the stage pipeline live here.
"""
