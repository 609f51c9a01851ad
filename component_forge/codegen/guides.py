"""
Per-target quick reference.

Short setup, conventions and idiom notes for the code each backend
emits. Install commands come from the registry so the guide always
matches ``get_target_info``.
"""

from typing import Dict, Union

from .core.target import Target
from .registry import get_registry, install_command

#: Guide sections in display order
GUIDE_TOPICS = ("setup", "conventions", "notes")

GUIDES: Dict[Target, Dict[str, str]] = {
    Target.REACT_TAILWIND: {
        "setup": (
            "Requires Tailwind CSS in the host project and a `cn` helper that "
            "merges class names:\n\n"
            "```ts\n"
            'import { clsx, type ClassValue } from "clsx"\n'
            'import { twMerge } from "tailwind-merge"\n\n'
            "export function cn(...inputs: ClassValue[]) {\n"
            "  return twMerge(clsx(inputs))\n"
            "}\n"
            "```\n\n"
            "The helper is imported from `utils_import` (default `@/lib/utils`)."
        ),
        "conventions": (
            "- Variant styles live in a `cva` table named `<component>Variants`.\n"
            "- Defaults are the first declared value of each axis.\n"
            "- Components use `React.forwardRef` and set `displayName`.\n"
            "- `asChild` renders through Radix `Slot` to restyle another element."
        ),
        "notes": (
            "Pass `className` to extend styles; `cn` lets later utilities win "
            "over conflicting variant classes. Export the variants table to "
            "style links or other elements like the component."
        ),
    },
    Target.REACT_STYLED: {
        "setup": (
            "Wrap the app in a `ThemeProvider` if styles read theme values. "
            "Point `styled_import` at another styled package (for example "
            "`@emotion/styled`) to switch engines."
        ),
        "conventions": (
            "- One styled element per component, named `Styled<Component>`.\n"
            "- Variant axes are passed as transient `$axis` props so they never "
            "reach the DOM.\n"
            "- Components use `React.forwardRef` and set `displayName`."
        ),
        "notes": (
            "Utility-class strings from the blueprint are not translated into "
            "CSS declarations; fill in the per-variant rules by hand or map "
            "them to theme tokens."
        ),
    },
    Target.REACT_CSS_MODULES: {
        "setup": (
            "Needs a bundler with CSS Modules support (Vite, Next.js and webpack "
            "with css-loader all qualify). The stylesheet is imported from "
            "`./<Component><stylesheet_suffix>` (default `.module.css`)."
        ),
        "conventions": (
            "- Class names are looked up on the imported `styles` object.\n"
            "- `styles.base` always applies; each axis selects `styles[value]`.\n"
            "- Falsy entries are filtered before joining, so missing classes are "
            "skipped."
        ),
        "notes": (
            "Create the stylesheet alongside the component with one class per "
            "axis value. Keep value names valid CSS identifiers."
        ),
    },
    Target.VUE: {
        "setup": (
            "Targets Vue 3.3 or newer for `defineOptions` and type-based "
            "`defineProps` in `<script setup>`."
        ),
        "conventions": (
            "- Single-file component with `<script setup>` and a `<template>` "
            "root.\n"
            "- Variant defaults come from `withDefaults`, or prop `default` values "
            "when untyped.\n"
            "- Variant classes are combined in a `computed` array bound to the root."
        ),
        "notes": (
            "Attributes and listeners fall through to the root element. Use "
            "named slots for the blueprint's slot regions."
        ),
    },
    Target.SOLID: {
        "setup": (
            "Uses the same `cva` and `cn` helpers as the React utility-CSS "
            "target; configure Tailwind CSS and the `utils_import` path the "
            "same way."
        ),
        "conventions": (
            "- Props are split with `splitProps` so variant keys stay reactive.\n"
            "- Spread the remaining props onto the host element.\n"
            "- No `forwardRef`: pass `ref` as an ordinary prop."
        ),
        "notes": (
            "Never destructure `props` directly in a Solid component; doing so "
            "reads the values once and loses reactivity."
        ),
    },
    Target.HTML: {
        "setup": "Static markup with no build step. Include the stylesheet that defines the classes.",
        "conventions": (
            "- A labelled specimen for the base style, then one per axis value.\n"
            "- Each specimen carries the base classes plus that value's classes.\n"
            "- Output is untyped; `with_types` has no effect."
        ),
        "notes": (
            "Use the specimens as a visual reference or copy a block into a "
            "page. Compose multiple axis classes by hand."
        ),
    },
}


def get_target_guide(
    target: Union[Target, str], topic: str = "all", package_manager: str = "npm"
) -> str:
    """
    Quick reference for a target as Markdown.

    Args:
        target: Target member, id or alias
        topic: One of ``setup``, ``conventions``, ``notes``; anything else
            returns every section
        package_manager: Package manager for the install command

    Returns:
        Markdown guide

    Raises:
        RegistryError: If the target or package manager is not recognized
    """
    info = get_registry().get_target_info(target)
    entries = GUIDES[Target(info["id"])]
    install = install_command(info["dependencies"], package_manager)

    topics = [topic] if topic in GUIDE_TOPICS else list(GUIDE_TOPICS)
    sections = []
    for name in topics:
        body = entries[name]
        if name == "setup":
            prefix = f"```bash\n{install}\n```" if install else "Nothing to install."
            body = f"{prefix}\n\n{body}"
        sections.append(f"## {name.title()}\n\n{body}")

    return f"# {info['name']} (`{info['id']}`)\n\n" + "\n\n---\n\n".join(sections) + "\n"
