"""Default catalog seeding.

When no catalog exists at the conventional location, a starter catalog with
a single React component scaffold is written there for the user to edit.
"""

import json
from pathlib import Path

from boilgen.config import CATALOG_ENCODING
from boilgen.core.catalog import Catalog

DEFAULT_CATALOG: Catalog = {
    "Component": {
        "default": {
            "styles.module.scss": [
                "",
            ],
            "$TM_FILENAME_BASE.tsx": [
                "import React from 'react';",
                "",
                "import styles from './styles.module.scss'",
                "",
                "export const $TM_FILENAME_BASE = () => {",
                "  return <div>$TM_FILENAME_BASE</div>;",
                "};",
            ],
            "__tests__/buildName.spec.ts": [
                "",
            ],
            "types.ts": [
                "",
            ],
            "index.ts": [
                "export { $TM_FILENAME_BASE } from './$TM_FILENAME_BASE';",
            ],
        },
    },
}


def get_default_catalog_text() -> str:
    """Return the default catalog as formatted JSON."""
    return json.dumps(DEFAULT_CATALOG, indent=2, ensure_ascii=False) + "\n"


def write_default_catalog(path: Path) -> Path:
    """Write the default catalog to ``path``, creating parent directories.

    Overwrites an existing file; callers decide whether that is allowed.

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(get_default_catalog_text(), encoding=CATALOG_ENCODING)
    return path
