name = 'civiltime'
abstract = 'Integer civil time: instants, TZif zones, calendar arithmetic, and RFC 3339 text.'

fork = 'meridian' # Explicit branch name and a codename for the major version of the project.
release = None # A number indicating its position in the releases of a branch. (fork)

#: The particular study or subject that the package is related to.
study = 'horology'

#: Relevant emoji or reference--URL or relative file path--to an image file.
icon = '⌛'

version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
