"""Benchmark tokenize() throughput over the built-in grammars.

Outputs one row per language:
  Language | Input Size | Tokens | Elapsed | Throughput
"""

import argparse
import logging
import time

from syntok import format_tokens, get_tokenizer, list_languages
from syntok._decorators import measure_time

# representative snippet per language, repeated up to the target size
SEEDS: dict[str, str] = {
    "javascript": "const add = (a, b) => a + b; // sum\nfetch('/api').then(r => r.json());\n",
    "typescript": "interface User { id: number; name: string }\nexport function load(id: number) { return api(id); }\n",
    "react": "export const App = () => <Layout title=\"x\"><div>Hello {name}</div></Layout>;\n",
    "vue": "<template>\n  <button @click=\"go\" v-if=\"ok\">{{ label }}</button>\n</template>\n",
    "html": "<!-- nav -->\n<a href=\"/home\" class=\"link\">Home &amp; away</a>\n",
    "css": ".card:hover { color: #333; margin: 0 auto; transition: all 0.2s; }\n",
    "json": "{\"id\": 1, \"tags\": [\"a\", \"b\"], \"active\": true, \"score\": -2.5e3}\n",
    "java": "@Override\npublic int size() { return items.size(); } /* count */\n",
    "python": "@dataclass\ndef run(x: int = 3) -> str:\n    return f\"{x!r}\"  # done\n",
    "sql": "SELECT id, COUNT(*) FROM orders WHERE total > 10.5 GROUP BY id; -- report\n",
    "xml": "<?xml version=\"1.0\"?>\n<item id=\"7\"><![CDATA[raw]]></item>\n",
    "yaml": "services:\n  web:\n    image: \"nginx\"  # pinned\n    ports: [80, 443]\n",
    "properties": "server.port=8080\n# comment\nspring.datasource.url=jdbc:h2:mem:db\n",
    "log": "2024-05-01T12:00:00 INFO [main] started\n2024-05-01T12:00:01 WARN [db] slow query\n",
    "markdown": "# Title\n- **bold** and *italic* with `code` and [link](http://x.io)\n",
    "plaintext": "Just some text, nothing to highlight here.\n",
}


def make_text(seed: str, target_kb: int) -> str:
    """Repeat ``seed`` until the text is close to ``target_kb`` kilobytes."""
    target_bytes = target_kb * 1024
    repeat = max(1, target_bytes // len(seed.encode("utf-8")) + 1)
    return seed * repeat


@measure_time
def run(languages: list[str], target_kb: int, timeout: float | None) -> None:
    """Tokenize a synthetic input per language and print a throughput table."""
    tokenizer = get_tokenizer(timeout=timeout)

    header = f"| {'Language':12} | {'Input Size':10} | {'Tokens':9} | {'Elapsed':10} | {'Throughput':14} |"
    sep = f"| {'-' * 12} | {'-' * 10} | {'-' * 9} | {'-' * 10} | {'-' * 14} |"
    print(header)
    print(sep)

    for language in languages:
        text = make_text(SEEDS[language], target_kb)
        total_bytes = len(text.encode("utf-8"))

        t0 = time.perf_counter()
        tokens = tokenizer.tokenize(text, language)
        elapsed = time.perf_counter() - t0
        mbps = total_bytes / elapsed / (1024 * 1024) if elapsed else float("inf")

        if "".join(tok.content for tok in tokens) != text:
            raise RuntimeError(f"{language}: tokens do not reconstruct the input")

        row = (
            f"| {language:12} | {f'{total_bytes / 1024:.0f} KB':10} | {len(tokens):9,} "
            f"| {f'{elapsed * 1000:.1f} ms':10} | {f'{mbps:.2f} MB/sec':14} |"
        )
        print(row)


def main() -> None:
    """Parse arguments and run the tokenizer benchmark."""
    parser = argparse.ArgumentParser(
        description="Benchmark SynTok tokenize() across built-in grammars."
    )
    parser.add_argument(
        "--language",
        action="append",
        choices=list_languages(),
        help="Language to benchmark; repeat for several (default: all).",
    )
    parser.add_argument(
        "--size-kb",
        type=int,
        default=256,
        help="Approximate input size per language in KB (default: 256).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Optional regex timeout in seconds per scan.",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the tokens of each seed snippet instead of benchmarking.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    languages = args.language or list_languages()

    if args.dump:
        tokenizer = get_tokenizer()
        for language in languages:
            print(f"== {language}")
            print(format_tokens(tokenizer.tokenize(SEEDS[language], language)))
        return

    run(languages, args.size_kb, args.timeout)


if __name__ == "__main__":
    main()
