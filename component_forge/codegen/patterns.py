"""
Pattern catalogue.

Pre-authored blueprints for common UI patterns, used as seeds. Entries
are stored in wire form and parsed on every lookup so callers always
receive a fresh Blueprint.
"""

from typing import Any, Dict, List

from .core.blueprint import Blueprint

#: Entry returned for unrecognized pattern keys
DEFAULT_PATTERN = "button"

PATTERNS: Dict[str, Dict[str, Any]] = {
    "button": {
        "name": "Button",
        "kind": "fragment",
        "base": "button",
        "description": "Clickable action trigger.",
        "variants": {
            "variant": ["default", "destructive", "outline", "secondary", "ghost", "link"],
            "size": ["default", "sm", "lg", "icon"],
        },
        "styles": {
            "base": (
                "inline-flex items-center justify-center gap-2 whitespace-nowrap "
                "rounded-md text-sm font-medium transition-colors "
                "focus-visible:outline-none focus-visible:ring-2 "
                "disabled:pointer-events-none disabled:opacity-50"
            ),
            "variant": {
                "default": "bg-primary text-primary-foreground hover:bg-primary/90",
                "destructive": "bg-destructive text-destructive-foreground hover:bg-destructive/90",
                "outline": "border border-input bg-background hover:bg-accent hover:text-accent-foreground",
                "secondary": "bg-secondary text-secondary-foreground hover:bg-secondary/80",
                "ghost": "hover:bg-accent hover:text-accent-foreground",
                "link": "text-primary underline-offset-4 hover:underline",
            },
            "size": {
                "default": "h-10 px-4 py-2",
                "sm": "h-9 rounded-md px-3",
                "lg": "h-11 rounded-md px-8",
                "icon": "h-10 w-10",
            },
        },
        "props": ["loading", "leftIcon", "rightIcon"],
    },
    "input": {
        "name": "Input",
        "kind": "fragment",
        "base": "input",
        "description": "Single-line text field.",
        "variants": {
            "size": ["default", "sm", "lg"],
            "state": ["default", "error"],
        },
        "styles": {
            "base": (
                "flex w-full rounded-md border border-input bg-background px-3 py-2 "
                "text-sm placeholder:text-muted-foreground "
                "focus-visible:outline-none focus-visible:ring-2 "
                "disabled:cursor-not-allowed disabled:opacity-50"
            ),
            "size": {"default": "h-10", "sm": "h-9 text-xs", "lg": "h-11 text-base"},
            "state": {
                "default": "",
                "error": "border-destructive focus-visible:ring-destructive",
            },
        },
        "props": ["placeholder", "error", "helperText", "onChange"],
    },
    "select": {
        "name": "Select",
        "kind": "compound",
        "base": "select",
        "description": "Choice from a list of options.",
        "variants": {"size": ["default", "sm", "lg"]},
        "styles": {
            "base": (
                "flex w-full items-center justify-between rounded-md border "
                "border-input bg-background px-3 py-2 text-sm"
            ),
            "size": {"default": "h-10", "sm": "h-9", "lg": "h-11"},
        },
        "props": ["options", "placeholder", "value", "onValueChange"],
        "composition": ["SelectTrigger", "SelectContent", "SelectItem"],
    },
    "modal": {
        "name": "Modal",
        "kind": "compound",
        "base": "modal",
        "description": "Overlay dialog that captures focus until dismissed.",
        "variants": {"size": ["md", "sm", "lg", "full"]},
        "styles": {
            "base": (
                "fixed left-1/2 top-1/2 z-50 grid w-full -translate-x-1/2 "
                "-translate-y-1/2 gap-4 border bg-background p-6 shadow-lg sm:rounded-lg"
            ),
            "size": {
                "md": "max-w-lg",
                "sm": "max-w-sm",
                "lg": "max-w-2xl",
                "full": "max-w-[95vw] h-[95vh]",
            },
            "overlay": "fixed inset-0 z-50 bg-black/80",
        },
        "props": ["open", "title", "description", "onClose"],
        "slots": ["header", "footer"],
        "composition": ["ModalHeader", "ModalBody", "ModalFooter"],
    },
    "card": {
        "name": "Card",
        "kind": "compound",
        "base": "card",
        "description": "Grouped content container.",
        "variants": {"variant": ["default", "outline", "elevated"]},
        "styles": {
            "base": "rounded-lg border bg-card text-card-foreground",
            "variant": {
                "default": "shadow-sm",
                "outline": "shadow-none",
                "elevated": "shadow-lg",
            },
        },
        "props": ["title", "description", "hoverable"],
        "slots": ["header", "footer"],
        "composition": ["CardHeader", "CardTitle", "CardContent", "CardFooter"],
    },
    "data-table": {
        "name": "DataTable",
        "kind": "structure",
        "base": "data-grid",
        "description": "Tabular data with density control.",
        "variants": {"density": ["compact", "normal", "comfortable"]},
        "styles": {
            "base": "w-full caption-bottom text-sm",
            "density": {
                "compact": "[&_td]:px-2 [&_td]:py-1",
                "normal": "[&_td]:px-4 [&_td]:py-2",
                "comfortable": "[&_td]:px-6 [&_td]:py-4",
            },
        },
        "props": ["striped", "emptyState", "onSearch"],
        "composition": ["TableHeader", "TableBody", "TableRow", "TableCell"],
    },
    "tabs": {
        "name": "Tabs",
        "kind": "compound",
        "base": "tabs",
        "description": "Switch between related panels.",
        "variants": {"variant": ["default", "underline", "pills"]},
        "styles": {
            "base": "w-full",
            "variant": {
                "default": "rounded-md bg-muted p-1",
                "underline": "border-b",
                "pills": "gap-2",
            },
        },
        "props": ["items", "defaultValue", "onValueChange"],
        "composition": ["TabsList", "TabsTrigger", "TabsContent"],
    },
    "menu": {
        "name": "Menu",
        "kind": "compound",
        "base": "menu",
        "description": "List of actions revealed from a trigger.",
        "variants": {},
        "styles": {
            "base": "z-50 min-w-[8rem] overflow-hidden rounded-md border bg-popover p-1 shadow-md",
        },
        "props": ["items", "trigger", "onOpen", "onClose"],
        "composition": ["MenuTrigger", "MenuContent", "MenuItem"],
    },
    "alert": {
        "name": "Alert",
        "kind": "fragment",
        "base": "alert",
        "description": "Inline status message.",
        "variants": {"variant": ["default", "destructive", "success", "warning"]},
        "styles": {
            "base": "relative w-full rounded-lg border p-4",
            "variant": {
                "default": "bg-background text-foreground",
                "destructive": "border-destructive/50 text-destructive",
                "success": "border-green-500/50 text-green-700",
                "warning": "border-yellow-500/50 text-yellow-700",
            },
        },
        "props": ["title", "description", "icon", "dismissible", "onDismiss"],
    },
    "badge": {
        "name": "Badge",
        "kind": "fragment",
        "base": "badge",
        "description": "Small status label.",
        "variants": {"variant": ["default", "secondary", "destructive", "outline"]},
        "styles": {
            "base": "inline-flex items-center rounded-full border px-2.5 py-0.5 text-xs font-semibold",
            "variant": {
                "default": "border-transparent bg-primary text-primary-foreground",
                "secondary": "border-transparent bg-secondary text-secondary-foreground",
                "destructive": "border-transparent bg-destructive text-destructive-foreground",
                "outline": "text-foreground",
            },
        },
        "props": [],
    },
    "avatar": {
        "name": "Avatar",
        "kind": "fragment",
        "base": "avatar",
        "description": "User image with a text fallback.",
        "variants": {"size": ["md", "sm", "lg"]},
        "styles": {
            "base": "relative flex shrink-0 overflow-hidden rounded-full",
            "size": {"md": "h-10 w-10", "sm": "h-8 w-8", "lg": "h-14 w-14"},
        },
        "props": ["src", "alt", "fallback"],
    },
    "tooltip": {
        "name": "Tooltip",
        "kind": "compound",
        "base": "tooltip",
        "description": "Floating hint shown on hover or focus.",
        "variants": {"side": ["top", "right", "bottom", "left"]},
        "styles": {
            "base": "z-50 rounded-md border bg-popover px-3 py-1.5 text-sm shadow-md",
            "side": {
                "top": "mb-2",
                "right": "ml-2",
                "bottom": "mt-2",
                "left": "mr-2",
            },
        },
        "props": ["content", "trigger"],
    },
}


def lookup_pattern(key: str) -> Blueprint:
    """
    Return a fresh blueprint for a pattern key.

    Unrecognized keys return the default (button) entry.
    """
    entry = PATTERNS.get(key, PATTERNS[DEFAULT_PATTERN])
    return Blueprint.from_dict(entry)


def list_patterns() -> List[str]:
    """Catalogue keys in authoring order."""
    return list(PATTERNS.keys())
