"""
Example: reading custom fields with a transform chain.

Shows how a host application wires a provider and value transforms into a
FieldReader, and how the same setup looks when driven from configuration.
"""

from acffields import FieldReader, InMemoryFieldProvider, Term, TransformChain, build_reader

provider = InMemoryFieldProvider(
    {
        12: {
            "subtitle": {"value": "  Spring issue  ", "type": "text"},
            "hero": {"value": 301, "type": "image"},
        },
        "user_42": {"nickname": {"value": "ada", "type": "text"}},
        "category_7": {"colour": {"value": "teal", "type": "color_picker"}},
        "option": {"footer_text": {"value": "(c) Example", "type": "text"}},
    }
)

# =============================================================================
# Transforms run in order; each sees the previous result
# =============================================================================
transforms = TransformChain()


@transforms.add
def strip_text(value, key, field, hook_name):
    if field.type == "text" and isinstance(value, str):
        return value.strip()
    return value


@transforms.add
def expand_images(value, key, field, hook_name):
    if field.type == "image":
        return {"id": value, "url": f"https://cdn.example.org/media/{value}"}
    return value


reader = FieldReader(provider, transform=transforms)

print(reader.get_post_fields(12))
print(reader.get_user_fields(42))
print(reader.get_taxonomy_fields(["category", 7]))
print(reader.get_taxonomy_fields(Term(term_id=7, taxonomy="category")))
print(reader.get_option_fields())


# =============================================================================
# Same thing from configuration; a missing provider reads as inactive
# =============================================================================
configured = build_reader({"provider": {"kind": "memory", "fields": {"option": {"footer_text": "(c) Example"}}}})
print(configured.is_active(), configured.get_option_fields())

not_installed = build_reader({})
print(not_installed.is_active(), not_installed.get_option_fields())
