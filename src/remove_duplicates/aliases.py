from remove_duplicates.core.models import HashAlgorithmName, RemovalMethod

REMOVE_BY_ALIASES = {
    "newest": RemovalMethod.NEWEST,
    "oldest": RemovalMethod.OLDEST,
    "interactive": RemovalMethod.INTERACTIVE,
}

REMOVE_BY_CHOICES = list(REMOVE_BY_ALIASES.keys())

REMOVE_BY_HELP_TEXT = (
    "Removal method for duplicate buckets:\n"
    "  newest      : Keep the most recently modified file (default)\n"
    "  oldest      : Keep the least recently modified file\n"
    "  interactive : Choose the files to remove for every bucket\n"
    "Files matching a referent are always removed, whatever the method.\n"
)

HASH_ALIASES = {
    "blake3": HashAlgorithmName.BLAKE3,
    "sha256": HashAlgorithmName.SHA256,
}

HASH_CHOICES = list(HASH_ALIASES.keys())

EPILOG_TEXT = """
Examples:
  Remove duplicates inside Downloads, keeping the newest copy
  %(prog)s ~/Downloads

  Preview what would be removed from two folders, hashing with 4 threads
  %(prog)s ~/Downloads ~/Desktop --dry-run --threads 4

  Remove every file in Downloads that already exists in the photo archive
  %(prog)s ~/Downloads -r ~/Pictures/archive,/mnt/backup/photos

  Pick the copies to delete yourself
  %(prog)s ~/Documents --remove-by interactive
"""
