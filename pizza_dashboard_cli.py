#!/usr/bin/env python3
"""
CLI entry point for the Pizza Sales Dashboard.
"""
import sys
from pizza_sales_dashboard.cli.dashboard_cli import main

if __name__ == "__main__":
    sys.exit(main())
