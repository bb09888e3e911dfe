# havenapi

A collection of small web services backed by a DB-API connection (such as
`sqlite3`) and the local file system:

- **Best ever**: collect suggestions, offer two of them at random for a vote,
  keep them ordered by votes and show a leaderboard (`havenapi.bestever.BestEver`).
- **Language tools**: describe each `(text, tag)` token of a sentence in plain
  words, and turn adjectives into "hella-" adjectives
  (`havenapi.language.breakdown`, `havenapi.language.hellaify`).
- **Idea board**: post ideas and vote on them once per address
  (`havenapi.ideas.IdeaBoard`).
- **Notes**: per-address notes with an optional password (`havenapi.notes.Notes`).
- **File uploads**: store uploaded files for a day under a numeric id and
  clear out expired ones (`havenapi.uploads.FileUploads`).
- **Leaderboards**: paged player and colour rankings
  (`havenapi.leaderboard.leaderboard_query`).
- **Names and elements**: search name statistics and element names
  (`havenapi.names`, `havenapi.wiki.search_elements`).
- **Statistics**: collect daily counters into chart-ready series
  (`havenapi.eodstats.EodStats`).
- **Video info**: parse a video info response into formats with readable
  sizes (`havenapi.youtube.parse_video_info`, `havenapi.youtube.fetch_video_info`).
- **Singleplayer packs**: upload, like, list and download packs
  (`havenapi.single.SinglePacks`), served over HTTP by `havenapi.web.create_app`.

## Installation

```
pip install havenapi
```

For running the tests:

```
pip install "havenapi[test]"
pytest
```

## Library use

Readable byte sizes use powers of 1000:

```python
from havenapi.util import format_byte_size

format_byte_size(999)    # "999 B"
format_byte_size(1500)   # "1.5 kB"
```

The singleplayer pack server is a Flask application built around an open
database connection and a directory for pack files, which it creates if
needed:

```python
from havenapi.web import create_app

app = create_app(conn, "packs")
app.run()
```

It answers `POST /single_upload`, `GET /single_like/<id>/<uid>`,
`GET /single_list/<kind>` and `GET /single_list/<kind>/<query>` (kind is one of
`date`, `az`, `za` or `likes`; at most eleven packs are listed), and
`GET /single_download/<id>/<uid>`.

## Command

Rebuild the `names` table of a SQLite database from the yearly baby-name
archive:

```
havenapi-updatenames [--database nv7haven.db] [--archive names.zip] [--years-back 78]
```

Without `--archive` the archive is downloaded. The newest `years-back + 1`
yearly files are merged, keeping for each name its more common sex and count.

## What is not included

Only the singleplayer pack routes are wired into an HTTP application. The
other services are library classes and functions; serving them over HTTP is
left to the caller. There is no WebSocket server and no command that starts a
web server; the database tables each service reads are expected to exist
already (only `havenapi-updatenames` creates its own).