"""
Update a commented tsconfig.json in place.

tsc --init writes a tsconfig.json full of comments, which json.loads() rejects.
This script strips the comments, points rootDir and outDir at src/ and dist/,
and writes the file back as plain JSON.

Usage:
    python tsconfig_demo.py [path/to/tsconfig.json]
"""

import json
import sys
from pathlib import Path

import jsonscrub

SAMPLE = """{
  "compilerOptions": {
    /* Visit https://aka.ms/tsconfig to read more about this file */
    "target": "es2016",          /* Set the JavaScript language version. */
    // "rootDir": "./",          /* Specify the root folder. */
    "module": "commonjs",        /* Specify what module code is generated. */
    "strict": true,              /* Enable all strict type-checking options. */
  }
}
"""


def update_tsconfig(path: Path) -> dict:
    """Set rootDir and outDir in a tsconfig file and write it back."""
    with path.open(encoding="utf-8") as fp:
        tsconfig = jsonscrub.load(fp, strip_trailing_commas=True)

    tsconfig["compilerOptions"] = {
        **tsconfig.get("compilerOptions", {}),
        "rootDir": "./src",
        "outDir": "./dist",
    }
    path.write_text(json.dumps(tsconfig, indent=2), encoding="utf-8")
    return tsconfig


def main():
    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
    else:
        path = Path("tsconfig.json")
        if not path.exists():
            print(f"Writing sample {path}")
            path.write_text(SAMPLE, encoding="utf-8")

    print(f"Configuring {path}...")
    try:
        tsconfig = update_tsconfig(path)
    except json.JSONDecodeError as e:
        # Whitespace is preserved, so the position refers to the original file
        print(f"{path}:{e.lineno}:{e.colno}: {e.msg}")
        sys.exit(1)

    print(json.dumps(tsconfig, indent=2))


if __name__ == "__main__":
    main()
