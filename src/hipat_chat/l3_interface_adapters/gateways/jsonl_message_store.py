"""Gateway: JSON-lines message store — implements MessageStore port."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from hipat_chat.l1_entities.stored_message import StoredMessage

log = logging.getLogger('hipat.persist')


class JsonlMessageStore:
    """Appends every message to ``messages.jsonl`` under the output directory."""

    FILENAME = 'messages.jsonl'

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir
        self._output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._output_dir / self.FILENAME

    def save(self, record: StoredMessage) -> None:
        with self.path.open('a', encoding='utf-8') as f:
            f.write(record.model_dump_json() + '\n')
        log.debug('Stored %s message %s (session=%s)', record.role, record.message_id, record.session_id)

    def load(self, session_id: str) -> list[StoredMessage]:
        if not self.path.exists():
            return []
        records = []
        for lineno, line in enumerate(self.path.read_text(encoding='utf-8').splitlines(), start=1):
            if not line.strip():
                continue
            try:
                record = StoredMessage.model_validate_json(line)
            except ValueError:
                log.warning('Skipping malformed line %d in %s', lineno, self.path.name)
                continue
            if record.session_id == session_id:
                records.append(record)
        return records

    def export_markdown(self, session_id: str) -> Path:
        """Write the session as ``chat_<session_id>.md`` and return its path."""
        lines = [f'# Chat session {session_id}', '']
        for record in self.load(session_id):
            stamp = datetime.fromtimestamp(record.timestamp).strftime('%Y-%m-%d %H:%M:%S')
            lines.append(f'**{record.role}** ({stamp})')
            lines.append('')
            lines.append(record.content)
            lines.append('')
        path = self._output_dir / f'chat_{session_id}.md'
        path.write_text('\n'.join(lines), encoding='utf-8')
        return path
