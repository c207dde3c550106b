"""Status, index and prompt listing CLI commands."""

import argparse


def _mark(ok: bool) -> str:
    return "✓" if ok else "✗"


def cmd_status(args: argparse.Namespace) -> int:
    from projex_snippets.cli.common import build_service

    service = build_service(args)
    status = service.status()
    if status is None:
        print("ERROR: No workspace found")
        return 1

    print("\n  Projex Snippets Instructions")
    print(f"  {'═' * 50}")
    print(f"    {_mark(status.main_document_exists)} Main document   {status.main_document_path}")
    print(f"    {_mark(status.has_generated_section)} Activation section")
    print(f"    {_mark(status.instructions_exist)} Instructions    {status.instructions_path}")
    print(f"    {_mark(status.prompts_exist)} Prompts         {status.prompts_path}")

    print("\n  Categories")
    print(f"  {'─' * 50}")
    if status.categories:
        for cat in status.categories:
            print(f"    {cat.name:<24} {cat.file_count:>3} files")
    else:
        print("    No categories found.")

    print(f"\n  {status.prompt_count} prompt files available.")

    if status.ready:
        print("\n  All set: instructions and prompts are configured.")
    else:
        print("\n  Run `projex sync` to install or repair the instructions.")
    print()
    return 0


def cmd_index(args: argparse.Namespace) -> int:
    from projex_snippets.cli.common import build_service

    index = build_service(args).build_index()
    if not index:
        print("No instruction documents found.")
        return 0

    print(f"Found {len(index)} instruction documents:\n")
    for entry in index:
        print(f"  {entry.alias:<20} {entry.activation_path}")
        print(f"  {'':<20} keywords: {', '.join(entry.keywords)}")
    return 0


def cmd_prompts(args: argparse.Namespace) -> int:
    from projex_snippets.cli.common import build_service

    prompts = build_service(args).list_prompts()
    if not prompts:
        print("No prompts found.")
        return 0

    print(f"Found {len(prompts)} prompts:\n")
    for prompt in prompts:
        print(f"  {prompt.name}")
        print(f"    {prompt.description}")
        details = []
        if prompt.model:
            details.append(f"model: {prompt.model}")
        if prompt.mode:
            details.append(f"mode: {prompt.mode}")
        if prompt.tools:
            details.append(f"tools: {', '.join(prompt.tools)}")
        if details:
            print(f"    ({'; '.join(details)})")
    return 0


def cmd_overview(args: argparse.Namespace) -> int:
    """Keyword cheat sheet: every activation plus every prompt."""
    from projex_snippets.cli.common import build_service
    from projex_snippets.index.builder import group_by_alias

    service = build_service(args)
    groups = group_by_alias(service.build_index())
    prompts = service.list_prompts()

    print("\n  Keyword Activations")
    print(f"  {'─' * 50}")
    if not groups:
        print("    No instructions found.")
    for entries in groups.values():
        first = entries[0]
        print(f"    {first.display_title}")
        print(f"      keywords: {', '.join(first.keywords)}")
        print(f"      {first.description}")

    print("\n  Prompts")
    print(f"  {'─' * 50}")
    if not prompts:
        print("    No prompts found.")
    for prompt in prompts:
        print(f"    {prompt.name}: {prompt.description}")
    print()
    return 0
