"""Student Portal package.

Organized by feature modules (auth, cohorts, students, attendance, reports)
with a thin Flask controller layer over service/repository layers. All data
lives in a hosted Supabase project reached through its Python client.
"""
