from pathlib import Path

import pytest

from command_copy.documents.markdown_parser import MarkdownNode, MarkdownParser

SNIPPETS_MD = """# Kubernetes

> List pods

```sh
kubectl get pods -n $namespace
```

> Tail logs
> for one pod

```
kubectl logs -f ${pod} -n $namespace
```

> Indented block

    echo indented $value

> Explained first

Some prose in between.

```sh
echo not associated
```

> List pods

```sh
kubectl get pods -A
```

- > Inside a list

  ```sh
  echo from list
  ```
"""

EMPHASIS_MD = """> **Bold** label

```sh
echo bold
```
"""


@pytest.fixture(scope="module")
def docs_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the sample Markdown files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("docs")

    (dir_path / "snippets.md").write_text(SNIPPETS_MD, encoding="utf-8")
    (dir_path / "emphasis.md").write_text(EMPHASIS_MD, encoding="utf-8")

    return dir_path


@pytest.fixture(scope="module")
def parsed_snippets() -> MarkdownNode:
    """Parse the main sample once, reuse across tests."""
    return MarkdownParser().parse(SNIPPETS_MD)
