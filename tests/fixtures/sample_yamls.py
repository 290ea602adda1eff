"""Sample declaration files for integration testing.

This module provides reusable declaration documents for testing the
complete pipeline from YAML -> Pydantic -> registry -> TypeScript.
"""

from typing import Any

# Minimal valid document - a single struct
MINIMAL_YAML: dict[str, Any] = {
    "schema": "yaml-to-ts/v1",
    "types": [
        {
            "name": "Point",
            "fields": [
                {"name": "x", "type": "f64"},
                {"name": "y", "type": "f64"},
            ],
        },
    ],
}

MINIMAL_TS = "type Point = { x: number; y: number };\n"

# Document exercising renames, flatten, enums, generics and newtypes
FULL_YAML: dict[str, Any] = {
    "schema": "yaml-to-ts/v1",
    "meta": {
        "author": "Platform Team",
        "version": "1.0.0",
        "description": "Public API payloads",
    },
    "types": [
        {
            "name": "User",
            "rename_all": "camelCase",
            "fields": [
                {"name": "user_id", "type": "u64"},
                {"name": "display_name", "type": "optional<string>"},
                {"name": "profile", "type": "Profile", "flatten": True},
                {"name": "password_hash", "type": "string", "skip": True},
            ],
        },
        {
            "name": "Profile",
            "fields": [
                {"name": "bio", "type": "string"},
                {"name": "age", "type": "u8", "default": True},
            ],
        },
        {
            "name": "Message",
            "variants": [
                {"name": "Ping"},
                {"name": "Text", "items": ["string"]},
                {
                    "name": "Error",
                    "fields": [
                        {"name": "code", "type": "i32"},
                        {"name": "message", "type": "string"},
                    ],
                },
            ],
        },
        {
            "name": "Page",
            "generics": [{"name": "T"}],
            "fields": [
                {"name": "items", "type": "list<T>"},
                {"name": "total", "type": "u32"},
            ],
        },
        {"name": "UserPage", "kind": "tuple", "items": ["Page<User>"]},
    ],
}

FULL_TS = (
    "type User = { userId: number; displayName: string | null; bio: string; age?: number };\n"
    "\n"
    "type Profile = { bio: string; age?: number };\n"
    "\n"
    'type Message = { type: "Ping" } | { type: "Text"; value: string }'
    ' | { type: "Error"; code: number; message: string };\n'
    "\n"
    "type Page<T> = { items: T[]; total: number };\n"
    "\n"
    "type UserPage = Page<User>;\n"
)

# Types split over modules for multi-file output
MODULES_YAML: dict[str, Any] = {
    "schema": "yaml-to-ts/v1",
    "types": [
        {
            "name": "User",
            "module": "models.user",
            "fields": [{"name": "id", "type": "u64"}],
        },
        {
            "name": "Order",
            "module": "models.order",
            "fields": [
                {"name": "id", "type": "u64"},
                {"name": "owner", "type": "User"},
            ],
        },
        {
            "name": "Summary",
            "fields": [{"name": "orders", "type": "list<Order>"}],
        },
    ],
}
