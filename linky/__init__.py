"""linky: extract links from Markdown files and check them for brokenness."""
