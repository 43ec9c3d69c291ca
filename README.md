# relkit

Building blocks for tooling that prepares release artifacts: finding release
files, splitting data into checksummed chunks and batches, mapping file URLs
to bundle paths, validating command-line arguments, and reading the metadata
that mobile deployments (Cordova, CodePush, App Center) carry.

## Installation

```
pip install .
```

The test suite uses pytest; install it with the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `relkit.http`: `parse_link_header(s)` splits an HTTP `Link` header into one
  dict per link, with the link target under `_link`. `is_absolute_url(url)`
  reports whether a URL starts with `http://` or `https://`. The module also
  defines `HTTP_STATUS_502_BAD_GATEWAY`, `HTTP_STATUS_503_SERVICE_UNAVAILABLE`
  and `HTTP_STATUS_504_GATEWAY_TIMEOUT`.
- `relkit.fs`: `TempDir` and `TempFile`, uniquely named entries in the system
  temp directory that are removed by `cleanup()`, on leaving a `with` block,
  or when the object is collected. `TempFile.take(path)` moves an existing file
  into the temp directory and takes ownership of it; `open()` opens it for
  reading and writing, and `size()` returns its length. `is_writable(path)`,
  `set_executable_mode(path)` (mode 755, nothing on Windows),
  `get_sha1_checksum(stream)` for bytes or a binary stream, and
  `get_sha1_checksums(data, chunk_size)`, which returns the hex SHA1 of the
  whole input and a list of one per chunk; it raises `ValueError` unless
  `chunk_size` is a power of two.
- `relkit.chunks`: `batches(items, max_size, max_items)` yields
  `(batch, size)` pairs of consecutive items. A batch has a combined size of
  at most `max_size`, but always at least one item, and never more than
  `max_items` items. Integers count as their own size; other items must have
  a `size()` method (see `item_size`). `Chunk` pairs a checksum with data.
  `ASSEMBLE_POLL_INTERVAL` is one second.
- `relkit.dif`: the `DifType` enumeration (`dsym`, `elf`, `breakpad`,
  `proguard`, `sourcebundle`, `pe`, `pdb`, `wasm`) with `DifType.parse`, and
  `ObjectDifFeatures`, whose string form lists the enabled features, e.g.
  `symtab, debug, unwind, sources`, or `none`.
- `relkit.file_upload`: `UploadContext`, `ReleaseFile` with `log`, `warn` and
  `error` messages at a `LogLevel`, and `url_to_bundle_path(url)`.
- `relkit.file_search`: `ReleaseFileSearch(path)` collects files below a
  path. It can be limited by `extension`/`extensions`, given override globs
  with `ignore`/`ignores` (a plain glob whitelists, `!glob` excludes), and
  pointed at a gitignore-style file with `ignore_file`. Hidden files are
  skipped unless whitelisted. `collect_files()` returns `ReleaseFileMatch`
  objects and prints a one-line count; `collect_file(path)` reads one file.
- `relkit.cordova`: `CordovaConfig.load(path)` reads a Cordova `config.xml`
  (returning `None` if the root is not a widget) and derives
  `android_release_name()` and `ios_release_name()`.
- `relkit.codepush`: `get_codepush_deployments(app)` and
  `get_codepush_package(app, deployment)` run the `code-push` command-line
  tool (preferring `node_modules/.bin/code-push`) and raise `CodePushError`
  on failure.
- `relkit.appcenter`: `get_appcenter_deployment_history(app, deployment)` and
  `get_appcenter_package(app, deployment)` run the `appcenter` command-line
  tool the same way and raise `AppCenterError`; the package returned is the
  last entry of the history.
- `relkit.args`: `validate_org`, `validate_project`, `validate_version`,
  `validate_int`, `validate_timestamp`, `validate_uuid` and `validate_id`
  return the value or raise `argparse.ArgumentTypeError`.
  `get_timestamp(value)` turns a Unix timestamp, an RFC 3339 date or an
  RFC 2822 date into a UTC `datetime`. `add_org_arg`, `add_project_arg`,
  `add_projects_arg`, `add_org_project_args` and `add_version_arg` add the
  matching options to an `argparse` parser.
- `relkit.formatting`: `HumanDuration` renders a `timedelta` by its largest
  whole unit (`2 hours`, `1 minute`, `0 seconds`); `Table` builds rows of
  cells, renders them with `render()` and prints them with `print()`.
- `relkit.enc`: `decode_unknown_string(data)` decodes UTF-8, or falls back to
  a detected encoding, raising `UnknownEncodingError` when detection is not
  confident enough.

## Examples

```python
from relkit.chunks import batches

list(batches([5, 10, 1, 1, 1, 1], max_size=5, max_items=3))
# [([5], 5), ([10], 10), ([1, 1, 1], 3), ([1], 1)]
```

```python
from relkit.file_upload import url_to_bundle_path

url_to_bundle_path("~/dist/js/bundle.js.map")
# '_/_/dist/js/bundle.js.map'
```

```python
from relkit.http import parse_link_header

parse_link_header('<https://example.com/?cursor=1>; rel="next"')
# [{'_link': 'https://example.com/?cursor=1', 'rel': 'next'}]
```

## What this package does not do

- It has no server API client: it does not upload files, chunks or
  artifact bundles, and does not poll for processing results.
- It does not read the contents of debug information files; `relkit.dif`
  only names their types and feature sets.
- It does not derive React Native release names from Xcode or Gradle
  projects.
- It provides no command-line program of its own; `relkit.args` only helps
  build one.