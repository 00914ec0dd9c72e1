"""
Printing model replies.

Plain replies are printed as-is. Prefilled replies are printed as
prefill + continuation, since the API only returns the continuation.
JSON replies are parsed and pretty-printed, falling back to the raw text
when the model produced something that does not parse.
"""

import json

WIDTH = 80


def banner(title, subtitle=None):
    print("\n" + "=" * WIDTH)
    print(title)
    print("=" * WIDTH)
    if subtitle:
        print(subtitle + "\n")


def show_text(text):
    print(text)
    return text


def show_primed(prefill, continuation):
    """The API returns only what comes after the prefill, so glue it back on."""
    full = prefill + continuation
    print(full)
    return full


def check_required_keys(parsed, schema):
    """Return (missing, unexpected) top-level keys compared to schema["required"]."""
    required = set(schema.get("required", []))
    keys = set(parsed) if isinstance(parsed, dict) else set()
    return sorted(required - keys), sorted(keys - required)


def show_json(text, prefix="", schema=None):
    """Parse prefix + text as JSON and pretty-print it.

    Returns the parsed object, or None if it did not parse (the raw text is
    printed instead). Bad model output is never fatal.
    """
    raw = prefix + text
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        print("Raw response (failed to parse JSON):")
        print(raw)
        return None

    print(json.dumps(parsed, indent=2, ensure_ascii=False))

    if schema is not None:
        missing, unexpected = check_required_keys(parsed, schema)
        if missing or unexpected:
            print(f"\n⚠️  Keys differ from schema. missing={missing} unexpected={unexpected}")
    return parsed


def handle_reply(request, text, schema=None):
    """Print a reply the way its request asks for."""
    prefill = request.prefill
    if request.expects_json:
        return show_json(text, prefix=prefill or "", schema=schema)
    if prefill:
        return show_primed(prefill, text)
    return show_text(text)
