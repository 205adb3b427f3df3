"""
Test cases for real-world JSON-with-comments documents.

These tests cover configuration files that tools generate with comments and
trailing commas, and the read/strip/parse/edit/write cycle used to update them.
"""

import json
import unittest

import jsonscrub

TSCONFIG = """{
  "compilerOptions": {
    /* Visit https://aka.ms/tsconfig to read more about this file */

    /* Language and Environment */
    "target": "es2016",                                  /* Set the JavaScript language version for emitted JavaScript. */
    // "lib": [],                                        /* Specify a set of bundled library declaration files. */

    /* Modules */
    "module": "commonjs",                                /* Specify what module code is generated. */
    // "rootDir": "./",                                  /* Specify the root folder within your source files. */

    /* Emit */
    // "outDir": "./",                                   /* Specify an output folder for all emitted files. */

    /* Type Checking */
    "strict": true,                                      /* Enable all strict type-checking options. */
    "skipLibCheck": true                                 /* Skip type checking all .d.ts files. */
  }
}
"""

VSCODE_SETTINGS = """{
    // Editor
    "editor.tabSize": 2,
    "editor.rulers": [80, 120,],
    "files.exclude": {
        "**/node_modules": true, // dependencies
        "**/*.js.map": true,
    },
    "search.exclude": {"dist/**": true},
    "terminal.integrated.env.linux": {"PATH": "/usr/local/bin:${env:PATH}"},
}
"""


class TestGeneratedTsconfig(unittest.TestCase):
    """Test the tsconfig.json that tsc --init writes."""

    def test_standard_json_rejects_it(self) -> None:
        """Test that the file is not strict JSON."""
        with self.assertRaises(json.JSONDecodeError):
            json.loads(TSCONFIG)

    def test_parse_after_strip(self) -> None:
        """Test parsing the stripped document with the json module."""
        config = json.loads(jsonscrub.strip(TSCONFIG))

        self.assertEqual(
            config,
            {
                "compilerOptions": {
                    "target": "es2016",
                    "module": "commonjs",
                    "strict": True,
                    "skipLibCheck": True,
                }
            },
        )

    def test_url_in_comment_removed(self) -> None:
        """Test that a URL inside a block comment does not confuse the scanner."""
        stripped = jsonscrub.strip(TSCONFIG)

        self.assertNotIn("aka.ms", stripped)
        self.assertEqual(len(stripped), len(TSCONFIG))
        self.assertEqual(stripped.count("\n"), TSCONFIG.count("\n"))

    def test_update_and_write_back(self) -> None:
        """Test the read/strip/parse/edit/serialize cycle."""
        config = jsonscrub.loads(TSCONFIG)
        config["compilerOptions"] = {
            **config["compilerOptions"],
            "rootDir": "./src",
            "outDir": "./dist",
        }
        written = json.dumps(config, indent=2)

        reloaded = json.loads(written)
        self.assertEqual(reloaded["compilerOptions"]["rootDir"], "./src")
        self.assertEqual(reloaded["compilerOptions"]["outDir"], "./dist")
        self.assertEqual(reloaded["compilerOptions"]["target"], "es2016")


class TestEditorSettings(unittest.TestCase):
    """Test editor settings files with trailing commas."""

    def test_requires_trailing_comma_option(self) -> None:
        """Test that trailing commas must be opted into."""
        with self.assertRaises(json.JSONDecodeError):
            jsonscrub.loads(VSCODE_SETTINGS)

    def test_parse_with_trailing_commas(self) -> None:
        """Test parsing settings that mix comments and trailing commas."""
        settings = jsonscrub.loads(VSCODE_SETTINGS, strip_trailing_commas=True)

        self.assertEqual(settings["editor.tabSize"], 2)
        self.assertEqual(settings["editor.rulers"], [80, 120])
        self.assertEqual(
            settings["files.exclude"], {"**/node_modules": True, "**/*.js.map": True}
        )
        self.assertEqual(settings["search.exclude"], {"dist/**": True})
        self.assertEqual(
            settings["terminal.integrated.env.linux"]["PATH"],
            "/usr/local/bin:${env:PATH}",
        )

    def test_compact_output_parses_identically(self) -> None:
        """Test that compact mode yields the same data."""
        compact = jsonscrub.strip(
            VSCODE_SETTINGS, preserveWhitespace=False, stripTrailingCommas=True
        )

        self.assertLess(len(compact), len(VSCODE_SETTINGS))
        self.assertNotIn("//", compact.replace("**/", ""))
        self.assertEqual(
            json.loads(compact),
            jsonscrub.loads(VSCODE_SETTINGS, strip_trailing_commas=True),
        )


class TestStrictJsonPassthrough(unittest.TestCase):
    """Test that valid JSON without comments is never altered."""

    def test_valid_json_unchanged(self) -> None:
        """Test a variety of strict JSON documents."""
        documents = [
            '{"a": [1, 2, {"b": null}], "c": "d"}',
            '"just a string with // and /* */"',
            "[]",
            '{"escaped": "quote \\" and backslash \\\\", "n": -1.5e10}',
            '{"unicode": "\\u00e9\\u4e2d"}',
        ]
        for document in documents:
            with self.subTest(document=document):
                self.assertEqual(jsonscrub.strip(document), document)
                self.assertEqual(
                    jsonscrub.strip(document, strip_trailing_commas=True), document
                )
                self.assertEqual(jsonscrub.loads(document), json.loads(document))


if __name__ == "__main__":
    unittest.main()
