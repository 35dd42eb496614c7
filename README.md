# quizbuild

Build the data file for a quiz website from a directory of Rust programs and
their explanations. Every answer is verified by compiling the program with
`rustc` and, where it should compile, running it.

## Layout

Run the tool from the root of a quiz repository laid out like this:

```
questions/
    001-some-topic.rs
    001-some-topic.md
    002-another-topic.rs
    002-another-topic.md
docs/
    ...
```

Each `.rs` file in `questions/` is a question. Its file name must contain
`questions/NNN<name>.rs`, where `NNN` is three digits and the name uses only
lower-case letters, digits and dashes; the three digits become the question
number.

Its `.md` companion is either the single word `tombstone` (a retired question,
kept with its code only) or follows this format exactly:

```
Answer: 999
Difficulty: 1|2|3

# Hint

<!-- markdown -->

# Explanation

<!-- markdown -->
```

`Answer` is one of:

- digits: the exact text the program must print to stdout;
- `error`: the program must fail to compile;
- `undefined`: the program has undefined behaviour, so it must compile but is
  not run.

An optional line `Warnings: lint_a, lint_b` directly after `Difficulty` lists
the compiler warnings the program is expected to trigger.

## Usage

Install the package, then run from the repository root:

```
quizbuild
```

For every question this:

1. compiles it with `rustc --edition=2021 --deny=warnings`, allowing the
   listed warnings, into `rust-quiz` under the system temporary directory
   (`rustc` must be on your `PATH`);
2. if that fails but the program compiles with `--allow=warnings`, reports
   that it compiled with unlisted warnings;
3. checks the outcome against the answer, running the compiled program and
   comparing its output when the answer is a number;
4. checks that each listed warning is really raised;
5. renders the hint and explanation from CommonMark to HTML, with links set to
   open in a new tab.

Progress (`evaluating <path>`) and any `ERROR: ...` lines go to stderr. If any
question fails, the command exits with status 1 and writes nothing. Otherwise
it writes `docs/questions.js`:

```
var questions = {
  "1": {"code": "...", "difficulty": 2, "answer": "...", "hint": "...", "explanation": "..."},
  ...
};
```

Tombstoned questions carry only `code`.

To render and then preview the site locally:

```
quizbuild serve
```

After rendering, this serves the current directory over HTTP at
`http://localhost:8000/` (bound to `127.0.0.1`) until interrupted. A request
for `/` is answered with a `301` redirect to `/rust-quiz/`; every other path is
served as a static file. Request logs go to the `quizbuild.serve` logger at
debug level.

`quizbuild --version` prints the version.

## Library use

```python
from quizbuild.render import parse_markdown, render_to_html, load_question, render_all

html = render_to_html("Some *markdown* with a [link](https://example.com)")

quiz, warnings = parse_markdown(open("questions/001-x.md").read(), "questions/001-x.md")
number, question = load_question("questions/001-x.rs")   # compiles and runs it
data = question.to_json()

render_all("questions", "docs/questions.js")
```

`quizbuild.serve.create_server(address, directory)` returns a
`ThreadingHTTPServer` using `QuizRequestHandler` over the given directory.

Failures are raised as subclasses of `quizbuild.errors.QuizError`:
`CompiledWithWarnings`, `ExecuteError`, `FilenameFormatError`,
`MarkdownFormatError`, `MissingExpectedWarning`, `RustcError`,
`ShouldCompile`, `ShouldNotCompile`, `UndefinedShouldCompile` and
`WrongOutput`.

## What it does not do

The package contains no questions and no website pages: it only checks the
questions you provide and writes `docs/questions.js`. The built-in server is a
plain threaded HTTP/1 static-file server meant for local preview, not for
deployment.

## Tests

```
pip install -e ".[test]"
pytest
```