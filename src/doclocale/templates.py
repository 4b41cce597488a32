"""Templates written by `doclocale init`."""

DEFAULT_CONFIG_YAML = """\
# DocLocale configuration
#
# Target language code. Selects translations/<stage>/<l10n_code>/.
l10n_code: 'en'

# One of 'generate', 'inject', 'strip' (or 'default'). Unknown values fall
# back to 'generate'.
translation_mode: 'generate'

# TypeDoc JSON output ('typedoc --json docs/typedoc.json').
project_json: 'docs/typedoc.json'

# Where 'inject' and 'strip' write the rewritten tree. Defaults to
# '<project_json stem>.<l10n_code>.json' next to the input.
# output_json: 'docs/typedoc.fr.json'

# Root of the prod/ and staging/ snapshot directories.
translations_dir: 'translations'

# Copied into a new staging directory when no prod README exists.
readme: 'README.md'
"""
