"""Personnel Panel package.

Organized by feature modules (employees, performance, exports, ...) with a thin
Flask controller layer over service/repository layers.
"""
