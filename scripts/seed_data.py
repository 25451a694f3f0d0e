#!/usr/bin/env python3
"""
Script para poblar la base de datos con el grupo de ejemplo.

Uso:
    python scripts/seed_data.py
    python scripts/seed_data.py --db data/otra.db
"""
import argparse
import sys
import os

# Agregar el directorio raíz al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from bandcal.db.seed import seed_all


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the bandcal database")
    parser.add_argument("--db", help="SQLite file (defaults to BANDCAL_DB_PATH)")
    args = parser.parse_args()
    seed_all(args.db)
