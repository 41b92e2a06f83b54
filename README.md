# hydent

Front-end components for the Hydent programming language: a tokenizer,
string interning, source spans, a simple arena, diagnostic structures and
the node types of the syntax tree.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Tokenizing source

```python
from hydent.tokenizer import tokenize

for token in tokenize("pub fn main() { let x = 42; }"):
    print(token)
```

This prints lines such as `pub keyword`, `identifier`, `(`, `= operator`,
`integer literal 42` and, last, `EOF`: the token list always ends with an
end-of-file token.

`tokenize(source)` uses a fresh symbol table; to share one, build a
`hydent.tokenizer.Tokenizer(source, symbol_factory)` and call its
`tokenize()` method.

What the tokenizer produces:

- `Token` values (`hydent.tokens`), each with a `TokenKind` and a payload:
  a `Keyword`, an `Operator`, a `Delimiter`, a `Literal`, a `Comment`, or a
  `Symbol` for identifiers. Equal identifier names get equal symbols.
- Literals: decimal integers that fit in 32 signed bits, floats (with `.`
  or an exponent) rounded to single precision, strings (kept as the `Span`
  of their contents, escapes left as written), and single characters with
  the escapes `\n`, `\r`, `\t`, `\\` and `\'`.
- Comments: `// ...` line comments, `/* ... */` block comments (which may
  nest), and `/// ...` doc comments carrying the span of their text.

Malformed input raises `hydent.errors.TokenizeError`; its `kind` is a
`TokenizeErrorKind` and its `index` the byte offset of the problem, and its
message reads like `Unknown token at index 3`. Numbers written with a `0x`
or `0b` prefix are scanned but rejected as invalid integer literals, as are
integers outside the 32-bit range.

`Token.is_first_set()` tells whether a token can begin a top-level
declaration (declaration keywords, `@`, doc comments);
`Token.is_follow_set()` additionally accepts `}` and end-of-file. Both are
meant for error recovery in a parser.

## Building blocks

- `hydent.span.Span`: a half-open byte range; `Span.with_ref(holder)` gives a
  `SpanWithRef` that compares and hashes by the text it covers.
- `hydent.source_holder.SourceHolder`: holds the source; `len()` is its size
  in UTF-8 bytes. `upgrade()` returns a `SourceHolderWithLineInfo` that
  records the offset of every newline; `slice_from_line_info(begin_line,
  begin_column, end_line, end_column)` slices from the offset of the given
  (1-based) newline plus a column. Out-of-range positions raise `IndexError`.
- `hydent.symbol.SymbolFactory`: interns source ranges through `from_span`
  or `from_range`, numbering `Symbol` ids from 0 in order of first
  appearance.
- `hydent.arena.Arena`: `alloc` stores one value and returns an `ArenaBox`
  (read it through `.value`); `alloc_iter` stores a sequence and returns a
  re-iterable `ArenaIter`; `alloc_with(func)` stores results of `func` until
  it returns `None`.
- `hydent.diagnostic`: `Highlight`, `Suggestion`, `DiagnosticLevel`, and the
  abstract `CompilerDiagnosticPattern`, whose `documentation_url()` is built
  from the four-digit error code.
- `hydent.context`: `CompilerFrontendContext.from_source(source, arena)`
  bundles a source holder, a symbol factory and an arena;
  `integrate_all_contexts(contexts)` merges `Mergeable` values by splitting
  the list in halves and raises `ValueError` when it is empty.
  `CompilerMiddleendContext` and `CompilerBackendContext` are empty holders.
- `hydent.syntax_tree`: immutable, hashable node classes for the Hydent
  syntax tree (declarations, expressions, statements, types, patterns),
  with sequence fields stored as tuples.
- `hydent.errors`: `TokenizeError` and `ParseError`.

## What it does not do

There is no parser: the syntax-tree classes can be built by hand, but
nothing turns a token list into them. There is also no name resolution,
type checking, code generation or command-line program; the package stops
at tokens and tree node types.