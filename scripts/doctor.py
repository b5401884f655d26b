# -*- coding: utf-8 -*-
import sys
from pathlib import Path

def ok(msg): print(f"[OK] {msg}")
def warn(msg): print(f"[WARN] {msg}")
def fail(msg):
    print(f"[FAIL] {msg}")
    sys.exit(1)

def main():
    # repo root = parent of scripts/
    root = Path(__file__).resolve().parents[1]
    ok(f"Repo root: {root}")

    # 1) Python version
    if sys.version_info < (3, 10):
        fail(f"Python {sys.version.split()[0]} is too old. Use Python 3.10+")
    ok(f"Python: {sys.version.split()[0]}")

    # 2) Required files
    if not (root / "pyproject.toml").exists():
        fail("pyproject.toml not found (run from repo root)")
    ok("pyproject.toml exists")

    entry = root / "bmicalc" / "main.py"
    if not entry.exists():
        fail("bmicalc/main.py not found (run from repo root)")
    ok("bmicalc/main.py exists")

    # 3) Templates + static files the form needs
    for rel in ("templates/base.html", "templates/index.html", "static/style.css"):
        path = root / "bmicalc" / rel
        if not path.exists():
            fail(f"Missing bmicalc/{rel}")
    ok("Templates and static files present")

    # 4) Dependencies importable
    missing = []
    for mod in ("fastapi", "jinja2", "multipart", "pydantic_settings", "dotenv"):
        try:
            __import__(mod)
        except ImportError:
            missing.append(mod)
    if missing:
        warn("Not importable: " + ", ".join(missing))
        warn("Hint: pip install -e .[test]")
    else:
        ok("Dependencies importable")

    # 5) Local .env (optional)
    env_file = root / ".env"
    if env_file.exists():
        ok(".env found (BMI_* settings will be loaded from it)")
    else:
        ok("No .env found, using defaults.")

    ok("Doctor check finished.")

if __name__ == "__main__":
    main()
