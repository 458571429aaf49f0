"""
Test suite for IAC syntax and structure validation.

Validates:
1. All Python modules have valid syntax
2. Only storage components remain in the program
"""

import ast


def test_all_iac_files_have_valid_syntax(python_files_in_iac):
    errors = []
    for py_file in python_files_in_iac:
        try:
            ast.parse(py_file.read_text())
        except SyntaxError as e:
            errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

    assert not errors, "Syntax errors found:\n" + "\n".join(errors)


def test_program_imports_only_existing_components(iac_project_root):
    tree = ast.parse((iac_project_root / "__main__.py").read_text())
    modules = [
        node.module
        for node in ast.walk(tree)
        if isinstance(node, ast.ImportFrom) and node.module and node.module.startswith("IAC.")
    ]

    for module in modules:
        path = iac_project_root.parent.joinpath(*module.split("."))
        assert path.with_suffix(".py").exists() or (path / "__init__.py").exists(), module
