"""Fleet CRM package.

Organized by feature modules (schedules, attendance, distribution, ...) with a
thin Flask controller layer over service/repository layers. The distribution
module holds the hour-based workload redistribution engine.
"""
