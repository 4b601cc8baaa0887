import sqlite3

from . import config


def get_db():
    conn = sqlite3.connect(config.DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS messages (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            call_sid TEXT NOT NULL,
            role TEXT NOT NULL,
            content TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS meta (
            call_sid TEXT NOT NULL,
            key TEXT NOT NULL,
            value TEXT NOT NULL,
            PRIMARY KEY (call_sid, key)
        )
        """
    )
    conn.commit()


def save_message(call_sid, role, content):
    conn = get_db()
    try:
        init_db(conn)
        conn.execute(
            "INSERT INTO messages (call_sid, role, content) VALUES (?, ?, ?)",
            (call_sid, role, content),
        )
        conn.commit()
    finally:
        conn.close()


def load_messages(call_sid, limit=None):
    limit = limit or config.HISTORY_LIMIT
    conn = get_db()
    try:
        init_db(conn)
        rows = conn.execute(
            """
            SELECT role, content FROM (
                SELECT id, role, content FROM messages
                WHERE call_sid = ? ORDER BY id DESC LIMIT ?
            ) ORDER BY id ASC
            """,
            (call_sid, limit),
        ).fetchall()
    finally:
        conn.close()
    return [{"role": row["role"], "content": row["content"]} for row in rows]


def get_last_assistant_message(call_sid):
    conn = get_db()
    try:
        init_db(conn)
        row = conn.execute(
            """
            SELECT content FROM messages
            WHERE call_sid = ? AND role = ? ORDER BY id DESC LIMIT 1
            """,
            (call_sid, "assistant"),
        ).fetchone()
    finally:
        conn.close()
    return row["content"] if row else ""


def set_pending_text(call_sid, content):
    conn = get_db()
    try:
        init_db(conn)
        conn.execute(
            "INSERT OR REPLACE INTO meta (call_sid, key, value) VALUES (?, 'pending_text', ?)",
            (call_sid, content),
        )
        conn.commit()
    finally:
        conn.close()


def pop_pending_text(call_sid):
    conn = get_db()
    try:
        init_db(conn)
        row = conn.execute(
            "SELECT value FROM meta WHERE call_sid = ? AND key = 'pending_text'",
            (call_sid,),
        ).fetchone()
        conn.execute(
            "DELETE FROM meta WHERE call_sid = ? AND key = 'pending_text'",
            (call_sid,),
        )
        conn.commit()
    finally:
        conn.close()
    return row["value"] if row else ""


def clear_call(call_sid):
    conn = get_db()
    try:
        init_db(conn)
        conn.execute("DELETE FROM messages WHERE call_sid = ?", (call_sid,))
        conn.execute("DELETE FROM meta WHERE call_sid = ?", (call_sid,))
        conn.commit()
    finally:
        conn.close()
