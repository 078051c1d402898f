"""CLI Commands"""

import os
import sys

from commitmsg import STYLE_DESCRIPTIONS, Style
from commitmsg.config import Config, load_config, save_config, get_config_path, parse_duration
from commitmsg.output import bold, dim, info, print_success

PROG = "commit-msg"


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .commitmsgrc found)")

    env_style = os.environ.get('CM_STYLE')
    env_timeout = os.environ.get('CM_TIMEOUT')
    if env_style or env_timeout:
        print(f"  {dim('Environment overrides:')}")
        if env_style:
            print(f"    CM_STYLE={env_style}")
        if env_timeout:
            print(f"    CM_TIMEOUT={env_timeout}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    style:               {info(config.style)}")
    print(f"    conventional_commit: {info(str(config.conventional_commit).lower())}")
    print(f"    timeout:             {info(config.timeout)}")
    print(f"    show_cost:           {info(str(config.show_cost).lower())}")

    api_key_state = "set" if os.environ.get('OPENAI_API_KEY') else "not set"
    print(f"\n  {dim('OPENAI_API_KEY:')} {api_key_state}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .commitmsgrc (in current directory)")
    print(f"    Global: ~/.commitmsgrc")
    print(f"\n  {dim('Run')} {PROG} --setup {dim('to configure')}\n")

    return 0


def _ask_yes_no(question: str, default: bool) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    answer = input(f"\n{question} {hint}: ").strip().lower()
    if not answer:
        return default
    return answer.startswith('y')


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    styles = list(Style)
    print("Commit message style:\n")
    for i, style in enumerate(styles, 1):
        suffix = " (default)" if i == 1 else ""
        print(f"  {i}. {style.value}{suffix}")
        print(dim(f"     {STYLE_DESCRIPTIONS[style]}"))
    print()

    style = styles[0]
    while True:
        choice = input(f"Select [1-{len(styles)}] (Enter for default): ").strip()
        if choice == '':
            break
        if choice.isdigit() and 1 <= int(choice) <= len(styles):
            style = styles[int(choice) - 1]
            break

    conventional_commit = _ask_yes_no("Follow the Conventional Commits format?", False)

    timeout = Config().timeout
    while True:
        value = input(f"\nRequest timeout (Enter for {timeout}): ").strip()
        if not value:
            break
        try:
            if parse_duration(value) > 0:
                timeout = value
                break
        except ValueError:
            pass
        print("Enter a duration like 5s, 30s or 1m30s")

    show_cost = _ask_yes_no("Print the cost of each request?", False)

    config = Config(
        style=style.value,
        conventional_commit=conventional_commit,
        timeout=timeout,
        show_cost=show_cost,
    )
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = f'eval "$(register-python-argcomplete {PROG})"'
    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print(f"  register-python-argcomplete --shell powershell {PROG} | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print(f"  register-python-argcomplete --shell fish {PROG} | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
