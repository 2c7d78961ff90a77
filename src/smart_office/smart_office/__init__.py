"""Smart Office attendance package.

Organized by feature modules (directory, attendance, reports) with a thin
Flask controller layer on top of service/repository layers.
"""
