import argparse
import json
from pathlib import Path

from api.main import app

def main():
    parser = argparse.ArgumentParser(description="Exporta el esquema OpenAPI de la API")
    parser.add_argument("--out", default="openapi.json", help="fichero de salida")
    args = parser.parse_args()

    schema = app.openapi()
    out = Path(args.out)
    out.write_text(json.dumps(schema, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"✅ {out} escrito ({len(schema.get('paths', {}))} rutas)")

if __name__ == "__main__":
    main()
