"""Daily SQL quiz attendance package.

Organized by feature modules (users, students, questions, results) with a thin
Flask controller layer over service/repository layers.
"""
