"""
jsonscrub demonstration script.
"""

import jsonscrub


def main():
    print("jsonscrub - JSON Comment Stripper Demo")
    print("=" * 40)

    examples = [
        # Line comment
        ('{"a": 1 // comment\n}', {}, "Line comment"),
        # Block comment, dropped entirely
        ('/* block */ {"a": 1}', {"preserve_whitespace": False}, "Compact block comment"),
        # Comment markers inside strings
        ('{"url": "http://example.com/*x*/"}', {}, "Markers inside strings"),
        # Trailing commas
        ('{"items": [1, 2, 3,], "active": true,}', {"strip_trailing_commas": True},
         "Trailing commas"),
        # Escaped quotes
        ('{"say": "\\"// not a comment\\""} // a comment', {}, "Escaped quotes"),
        # Unterminated comment
        ('{"a": 1} /* never closed', {}, "Unterminated comment"),
    ]

    for i, (text, options, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text!r}")
        stripped = jsonscrub.strip(text, **options)
        print(f"Output: {stripped!r}")
        try:
            print(f"Parsed: {jsonscrub.loads(text, **options)}")
        except ValueError as e:
            print(f"Error:  {e}")

    print(f"\n{len(examples) + 1}. Non-text input")
    try:
        jsonscrub.strip(b'{"a": 1}')
    except jsonscrub.InvalidArgumentError as e:
        print(f"Error:  {e}")


if __name__ == "__main__":
    main()
