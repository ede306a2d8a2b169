"""
Script para aplicar as migrations SQL.

Uso:
    python migrations/apply.py

Requer: SUPABASE_URL e SUPABASE_SERVICE_KEY no .env
"""
import os
import sys
from pathlib import Path
from supabase import create_client

from dotenv import load_dotenv
load_dotenv()

MIGRATIONS_DIR = Path(__file__).parent


def listar_migrations() -> list[Path]:
    """Arquivos .sql do diretorio, em ordem de nome (001_, 002_, ...)."""
    return sorted(MIGRATIONS_DIR.glob("*.sql"))


def apply_migrations(supabase) -> list[str]:
    """
    Aplica todas as migrations em ordem via RPC exec_sql.

    Returns:
        Nomes das migrations que falharam
    """
    falhas = []
    for path in listar_migrations():
        print(f"[APPLY] {path.name}...")
        try:
            supabase.rpc("exec_sql", {"sql": path.read_text()}).execute()
            print(f"[OK] {path.name}")
        except Exception as e:
            print(f"[ERROR] {path.name}: {e}")
            falhas.append(path.name)
    return falhas


if __name__ == "__main__":
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_SERVICE_KEY")

    if not url or not key:
        print("Erro: SUPABASE_URL e SUPABASE_SERVICE_KEY necessarios no .env")
        sys.exit(1)

    print("=== Citei Migrations ===")
    print(f"URL: {url}")
    print()

    falhas = apply_migrations(create_client(url, key))

    if falhas:
        print()
        print("Execute os SQLs com erro manualmente no Supabase SQL Editor:")
        for nome in falhas:
            print(f"  - migrations/{nome}")
        sys.exit(1)
