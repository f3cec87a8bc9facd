"""Church school attendance package.

Organized by feature modules (students, attendance, photos, pages) with a
thin Flask controller layer over service/repository layers. All data lives
in a Google spreadsheet; student photos live in Google Drive.
"""
