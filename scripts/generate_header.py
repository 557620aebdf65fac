#!/usr/bin/env python3
"""
Regenerate header-complete.svg with live GitHub statistics and the
contribution grid for the last 52 weeks.

Markers used in header-complete.svg:
  {{YEARS_CODING}}, {{REPOSITORIES}}, {{COMMITS}}
  <!-- Contribution grid: 52 weeks ... -->  ...  </g> + <!-- Month labels -->

Environment variables:
  GITHUB_REPOSITORY_OWNER: GitHub username (falls back to USERNAME)
  GITHUB_TOKEN: Token used for the GraphQL API
  HEADER_SVG_PATH: Optional template path (default: header-complete.svg in the repo root)
"""

import sys

from header_generator.controller import main

if __name__ == "__main__":
    sys.exit(main())
