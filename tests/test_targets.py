"""Tests for the six target backends."""

import pytest

from component_forge.codegen import generate, list_patterns, lookup_pattern
from component_forge.codegen.core.blueprint import Blueprint
from component_forge.codegen.core.target import Target


def render(blueprint, target, **options):
    result = generate(blueprint, target, options or None)
    assert result.success, result.error_message
    return result


class TestReactTailwind:
    """Test the Tailwind + cva backend."""

    def test_variant_table(self, primary_button):
        """Test the cva declaration with both axes and their defaults."""
        code = render(primary_button, Target.REACT_TAILWIND).code
        assert 'const primaryButtonVariants = cva("flex", {' in code
        assert (
            "    intent: {\n"
            '      primary: "bg-blue",\n'
            '      danger: "bg-red",\n'
            "    },\n"
            "    size: {\n"
            '      sm: "h-8",\n'
            '      lg: "h-12",\n'
            "    },\n"
        ) in code
        assert 'defaultVariants: {\n    intent: "primary",\n    size: "sm",\n  },' in code

    def test_props_interface(self, primary_button):
        """Test the props type with asChild and the host attribute type."""
        code = render(primary_button, Target.REACT_TAILWIND).code
        assert (
            "export interface PrimaryButtonProps\n"
            "  extends React.ButtonHTMLAttributes<HTMLButtonElement>,\n"
            "    VariantProps<typeof primaryButtonVariants> {\n"
            "  asChild?: boolean\n"
            "}"
        ) in code

    def test_component_body(self, primary_button):
        """Test forwardRef, Slot and class composition."""
        code = render(primary_button, Target.REACT_TAILWIND).code
        assert "React.forwardRef<HTMLButtonElement, PrimaryButtonProps>(" in code
        assert "({ className, intent, size, asChild = false, ...props }, ref) => {" in code
        assert 'const Comp = asChild ? Slot : "button"' in code
        assert "className={cn(primaryButtonVariants({ intent, size, className }))}" in code
        assert 'PrimaryButton.displayName = "PrimaryButton"' in code
        assert code.endswith("export { PrimaryButton, primaryButtonVariants }\n")

    def test_static_component(self, static_box):
        """Test that no variant constructs appear without axes."""
        code = render(static_box, Target.REACT_TAILWIND).code
        assert "cva" not in code
        assert "VariantProps" not in code
        assert 'className={cn("p-4", className)}' in code
        assert "extends React.HTMLAttributes<HTMLDivElement> {" in code
        assert code.endswith("export { Box }\n")

    def test_untyped(self, primary_button):
        """Test JavaScript output."""
        result = render(primary_button, Target.REACT_TAILWIND, with_types=False)
        assert result.metadata["file_extension"] == ".jsx"
        assert "interface" not in result.code
        assert 'import { cva } from "class-variance-authority"' in result.code
        assert "const PrimaryButton = React.forwardRef(\n" in result.code

    def test_docs_header(self, primary_button):
        """Test the JSDoc block and turning it off."""
        code = render(primary_button, Target.REACT_TAILWIND).code
        assert " * Kind: fragment\n * Variants:\n * - intent: primary | danger\n" in code
        code = render(primary_button, Target.REACT_TAILWIND, with_docs=False).code
        assert "/**" not in code

    def test_custom_props(self, text_input):
        """Test vocabulary-typed extra props."""
        code = render(text_input, Target.REACT_TAILWIND).code
        assert "  placeholder?: string\n" in code
        assert "  onChange?: (value: string) => void\n" in code

    def test_utils_import_option(self, primary_button):
        """Test overriding the cn() import path."""
        code = render(primary_button, Target.REACT_TAILWIND, utils_import="~/cn").code
        assert 'import { cn } from "~/cn"' in code


class TestReactStyled:
    """Test the styled-components backend."""

    def test_transient_props(self, primary_button):
        """Test the $-prefixed props on the styled element."""
        code = render(primary_button, Target.REACT_STYLED).code
        assert 'import styled from "styled-components"' in code
        assert (
            "interface StyledPrimaryButtonProps {\n"
            '  $intent: "primary" | "danger"\n'
            '  $size: "sm" | "lg"\n'
            "}"
        ) in code
        assert "const StyledPrimaryButton = styled.button<StyledPrimaryButtonProps>`" in code
        assert "      $intent={intent}\n      $size={size}\n" in code

    def test_defaults_by_destructuring(self, primary_button):
        """Test that axis defaults become destructuring defaults."""
        code = render(primary_button, Target.REACT_STYLED).code
        assert (
            '({ intent = "primary", size = "sm", className, children, ...props }, ref) => ('
        ) in code
        assert 'PrimaryButton.displayName = "PrimaryButton"' in code

    def test_fixed_skeleton(self, primary_button):
        """Test that blueprint styles are not emitted."""
        result = render(primary_button, Target.REACT_STYLED)
        assert "display: inline-flex;" in result.code
        assert "transition: all 0.2s ease;" in result.code
        assert "bg-blue" not in result.code
        assert any("fixed style skeleton" in w for w in result.warnings)

    def test_void_element(self, text_input):
        """Test that void hosts drop children and self-close."""
        code = render(text_input, Target.REACT_STYLED).code
        assert "children" not in code
        assert "    />\n" in code

    def test_static_component(self, static_box):
        """Test that no transient props appear without axes."""
        code = render(static_box, Target.REACT_STYLED).code
        assert "$" not in code
        assert "const StyledBox = styled.div`" in code


class TestReactCssModules:
    """Test the CSS Modules backend."""

    def test_class_list(self, primary_button):
        """Test the module class list."""
        code = render(primary_button, Target.REACT_CSS_MODULES).code
        assert 'import styles from "./PrimaryButton.module.css"' in code
        assert (
            "const classes = [styles.base, styles[intent], styles[size], className]\n"
            "      .filter(Boolean)\n"
            '      .join(" ")'
        ) in code
        assert '({ intent = "primary", size = "sm", className, ...props }, ref) => {' in code
        assert "return <button ref={ref} className={classes} {...props} />" in code
        assert 'PrimaryButton.displayName = "PrimaryButton"' in code

    def test_static_component(self, static_box):
        """Test the class list without axes."""
        code = render(static_box, Target.REACT_CSS_MODULES).code
        assert "const classes = [styles.base, className]" in code

    def test_stylesheet_suffix(self, static_box):
        """Test a custom stylesheet suffix."""
        code = render(static_box, Target.REACT_CSS_MODULES, stylesheet_suffix=".css").code
        assert 'import styles from "./Box.css"' in code


class TestVue:
    """Test the Vue single-file component backend."""

    def test_typed_props(self, primary_button):
        """Test the interface and withDefaults block."""
        result = render(primary_button, Target.VUE)
        code = result.code
        assert result.metadata["file_extension"] == ".vue"
        assert '<script setup lang="ts">' in code
        assert 'defineOptions({ name: "PrimaryButton" })' in code
        assert (
            "const props = withDefaults(defineProps<Props>(), {\n"
            '  intent: "primary",\n'
            '  size: "sm",\n'
            "})"
        ) in code

    def test_variant_classes(self, primary_button):
        """Test the variant table and computed class list."""
        code = render(primary_button, Target.VUE).code
        assert 'import { computed } from "vue"' in code
        assert '    "danger": "bg-red",\n' in code
        assert "} as const" in code
        assert (
            "const classes = computed(() => [\n"
            '  "flex",\n'
            "  variantClasses.intent[props.intent],\n"
            "  variantClasses.size[props.size],\n"
            "])"
        ) in code
        assert '  <button :class="classes">\n    <slot />\n  </button>' in code

    def test_static_component(self, static_box):
        """Test that the props block and variant table are omitted."""
        code = render(static_box, Target.VUE).code
        assert "defineProps" not in code
        assert "variantClasses" not in code
        assert "computed" not in code
        assert '<div class="p-4">' in code

    def test_runtime_props(self, text_input):
        """Test untyped runtime prop declarations."""
        code = render(text_input, Target.VUE, with_types=False).code
        assert "<script setup>" in code
        assert (
            "const props = defineProps({\n"
            '  size: { type: String, default: "md" },\n'
            "  placeholder: { type: String },\n"
            "  onChange: { type: Function },\n"
            "})"
        ) in code
        assert '<input :class="classes" />' in code

    def test_node_prop_imports_vnode(self):
        """Test type imports for renderable props."""
        blueprint = Blueprint.from_dict({"name": "Tag", "props": ["icon"]})
        code = render(blueprint, Target.VUE).code
        assert 'import type { VNode } from "vue"' in code
        assert "  icon?: VNode\n" in code
        assert "defineProps<Props>()" in code

    def test_named_slots(self):
        """Test that slots render before the default slot."""
        code = render(lookup_pattern("modal"), Target.VUE).code
        assert '<slot name="header" />\n    <slot name="footer" />\n    <slot />' in code


class TestSolid:
    """Test the SolidJS backend."""

    def test_split_props(self, primary_button):
        """Test splitProps over axes, class and children."""
        code = render(primary_button, Target.SOLID).code
        assert 'import { splitProps, type ComponentProps } from "solid-js"' in code
        assert (
            'const [local, others] = splitProps(props, ["intent", "size", "class", "children"])'
        ) in code
        assert "{local.children}" in code
        assert "displayName" not in code

    def test_class_expression(self, primary_button):
        """Test the cva call fed from local props."""
        code = render(primary_button, Target.SOLID).code
        assert 'const primaryButtonVariants = cva("flex", {' in code
        assert (
            "class={cn(primaryButtonVariants({ intent: local.intent, size: local.size }), local.class)}"
        ) in code
        assert code.endswith("export { primaryButtonVariants }\n")

    def test_props_type(self, primary_button):
        """Test ComponentProps intersected with VariantProps."""
        code = render(primary_button, Target.SOLID).code
        assert (
            'export type PrimaryButtonProps = ComponentProps<"button"> &\n'
            "  VariantProps<typeof primaryButtonVariants>\n"
        ) in code

    def test_static_component(self, static_box):
        """Test output without axes."""
        code = render(static_box, Target.SOLID).code
        assert "cva" not in code
        assert 'splitProps(props, ["class", "children"])' in code
        assert 'class={cn("p-4", local.class)}' in code

    def test_jsx_element_props(self):
        """Test renderable props typed as JSX.Element."""
        blueprint = Blueprint.from_dict({"name": "Tag", "props": ["icon"]})
        code = render(blueprint, Target.SOLID).code
        assert "type ComponentProps, type JSX }" in code
        assert "    icon?: JSX.Element\n" in code


class TestHtml:
    """Test the static markup backend."""

    def test_blocks_per_axis_value(self, primary_button):
        """Test one base block plus one block per axis value."""
        code = render(primary_button, Target.HTML).code
        assert code.count("<!-- Base -->") == 1
        assert code.count("<!-- Variant: ") == 4
        assert '<!-- Base -->\n<button class="flex">PrimaryButton</button>' in code
        assert (
            '<!-- Variant: size=lg -->\n<button class="flex h-12">PrimaryButton</button>'
        ) in code

    def test_with_types_ignored(self, primary_button):
        """Test that the type flag has no effect."""
        typed = render(primary_button, Target.HTML, with_types=True)
        untyped = render(primary_button, Target.HTML, with_types=False)
        assert typed.code == untyped.code
        assert typed.metadata["file_extension"] == ".html"

    def test_void_elements_self_close(self, text_input):
        """Test self-closing markup."""
        code = render(text_input, Target.HTML).code
        assert '<input class="border h-8" />' in code

    def test_missing_style(self):
        """Test that values without a style keep only the base."""
        blueprint = Blueprint.from_dict(
            {"name": "Chip", "variants": {"tone": ["plain"]}, "styles": {"base": "px-2"}}
        )
        code = render(blueprint, Target.HTML).code
        assert '<!-- Variant: tone=plain -->\n<div class="px-2">Chip</div>' in code


@pytest.mark.parametrize("target", list(Target))
class TestAllTargets:
    """Properties every backend shares."""

    def test_deterministic(self, primary_button, target):
        """Test that identical calls produce identical output."""
        first = generate(primary_button, target)
        second = generate(primary_button, target)
        assert first.code == second.code

    def test_normalized_output(self, primary_button, target):
        """Test trailing whitespace and blank-line normalization."""
        code = generate(primary_button, target).code
        assert code.endswith("\n") and not code.endswith("\n\n")
        assert "\n\n\n" not in code
        assert all(line == line.rstrip() for line in code.split("\n"))
        assert not code.startswith("\n")

    def test_unknown_base_and_props(self, target):
        """Test that unknown vocabulary never fails generation."""
        blueprint = Blueprint.from_dict(
            {"name": "Mystery", "base": "hologram", "props": ["sparkle"]}
        )
        result = generate(blueprint, target)
        assert result.success
        assert any("Unknown base 'hologram'" in w for w in result.warnings)
        assert any("Unknown prop 'sparkle'" in w for w in result.warnings)

    def test_every_pattern_generates(self, target):
        """Test the whole catalogue against each backend."""
        for key in list_patterns():
            result = generate(lookup_pattern(key), target)
            assert result.success, f"{key}: {result.error_message}"
