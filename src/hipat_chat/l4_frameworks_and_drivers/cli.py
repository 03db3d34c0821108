"""CLI entry point for hipat-chat."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from hipat_chat import __version__


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-o',
    '--output-dir',
    default=None,
    type=click.Path(),
    help='Directory for the message log and debug log.',
)
@click.option(
    '-r',
    '--rules',
    default=None,
    help="Keyword rule set: built-in/user name or path to a YAML file (default: 'default').",
)
@click.option(
    '-b',
    '--backend',
    default=None,
    type=click.Choice(['keyword', 'agent']),
    help='Reply backend: canned keyword replies or an LLM-backed agent.',
)
@click.option(
    '-a',
    '--agent',
    'agent_role',
    default=None,
    help="Agent role to talk to when the backend is 'agent' (e.g. Nutrition).",
)
@click.option(
    '-m',
    '--message',
    default=None,
    help='Send a single message, print the reply and exit (no TUI).',
)
@click.option('--list-agents', is_flag=True, help='List available agents and exit.')
@click.option('--list-rules', is_flag=True, help='List available rule sets and exit.')
@click.option(
    '--export',
    'export_session',
    default=None,
    metavar='SESSION',
    help='Write a stored session as Markdown to the output directory and exit.',
)
@click.version_option(version=__version__)
def cli(config_path, output_dir, rules, backend, agent_role, message, list_agents, list_rules, export_session):
    """hipat -- chat with Pat, your fitness and nutrition assistant."""
    from hipat_chat.l3_interface_adapters.gateways.yaml_agent_directory import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlAgentDirectory,
    )
    from hipat_chat.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from hipat_chat.l3_interface_adapters.gateways.yaml_rule_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlRuleLoader,
    )
    from hipat_chat.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )

    if list_agents:
        for agent in YamlAgentDirectory().list_agents():
            inputs = ', '.join(m.value for m in agent.input_types) or 'none'
            click.echo(f'{agent.role:<12} {agent.name} [{inputs}]')
        return

    if list_rules:
        for meta in YamlRuleLoader().list_rule_sets():
            click.echo(f'{meta.key:<12} {meta.name}')
        return

    overrides: dict = {}
    if output_dir:
        overrides.setdefault('output', {})['directory'] = output_dir
    if rules:
        overrides.setdefault('router', {})['rules'] = rules
    if backend:
        overrides.setdefault('router', {})['backend'] = backend
    if agent_role:
        overrides.setdefault('agent', {})['role'] = agent_role

    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    out_dir = Path(config.output.directory)
    if export_session is not None:
        sys.exit(_export_session(out_dir, export_session))

    from hipat_chat.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: gateways not loaded for --help or --list-*
        DependencyContainer,
    )

    try:
        container = DependencyContainer(config, out_dir, infra=infra)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    missing_models = _preflight_llm(container.llm_client, config) if config.router.backend == 'agent' else []

    if message is not None:
        from hipat_chat.l4_frameworks_and_drivers.one_shot import (  # noqa: PLC0415 -- deferred: one-shot mode only
            run_once,
        )

        sys.exit(run_once(container.controller, message))

    from hipat_chat.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help or one-shot
        ChatApp,
    )

    app = ChatApp(
        config=config,
        output_dir=out_dir,
        controller=container.controller,
        missing_models=missing_models,
    )
    app.run()


def _preflight_llm(client, config) -> list[str]:
    """Warn on stderr when the LLM is unreachable. Returns models reported missing."""
    ok, err = client.check_connectivity()
    if not ok:
        click.echo(f'Warning: LLM not reachable ({err}). Agent replies will fall back to an apology.', err=True)
        return []
    return client.check_models([config.agent.model])


def _export_session(out_dir: Path, session_id: str) -> int:
    from hipat_chat.l3_interface_adapters.gateways.jsonl_message_store import (  # noqa: PLC0415 -- deferred: export mode only
        JsonlMessageStore,
    )

    store = JsonlMessageStore(out_dir)
    if not store.load(session_id):
        click.echo(f'Error: no stored messages for session {session_id} in {store.path}', err=True)
        return 1
    click.echo(str(store.export_markdown(session_id)))
    return 0
