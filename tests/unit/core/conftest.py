"""Shared fixtures for core unit tests"""

import pytest

from dominator_static.core.markdown.parse import make_parser


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

3. third
4. fourth

- [ ] todo
- [x] done

```rust
let x = 1;
```

---

> quoted
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser("gfm-like")


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)
