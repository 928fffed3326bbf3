#!/usr/bin/env python
"""
Render the Boxton layout from a JSON inputs file.

The file holds one JSON object with the layout inputs, e.g.:

    {"title": "Home", "classes": ["layout", "layout--boxton"],
     "content": {"content": "<p>Hi</p>"}}

Then run: python render_boxton.py inputs.json > fragment.html
Reads stdin when no file (or "-") is given.
"""

import argparse
import json
import os
import sys

import django


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render the Boxton layout fragment")
    parser.add_argument('inputs', nargs='?', default='-', help="JSON inputs file ('-' for stdin)")
    args = parser.parse_args(argv)

    try:
        if args.inputs == '-':
            data = json.load(sys.stdin)
        else:
            with open(args.inputs, 'r', encoding='utf-8') as f:
                data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Cannot read layout inputs: {e}", file=sys.stderr)
        return 2

    if not isinstance(data, dict):
        print("Layout inputs must be a JSON object", file=sys.stderr)
        return 2

    # Setup Django
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'boxton_django.settings')
    django.setup()

    from boxton_app.layout import render_layout

    try:
        fragment = render_layout(data)
    except TypeError as e:
        print(f"Invalid layout inputs: {e}", file=sys.stderr)
        return 2

    sys.stdout.write(fragment)
    return 0


if __name__ == '__main__':
    sys.exit(main())
