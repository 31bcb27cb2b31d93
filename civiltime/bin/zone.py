"""
# Print the transitions and subzones of a zone.

#!text
	python -m civiltime.bin.zone [location-name | path]

# The host's default zone is printed when no argument is given.
"""
import os.path
import sys
from .. import core
from .. import types
from .. import format
from .. import tzif
from .. import views
from .. import libzone

def print_zone_transitions(zone, write=sys.stdout.write):
	for transition, subzone in zone.transitions_with_subzones():
		ts = format.render(types.Instant.from_unix(transition), format.ISO8601, libzone.utc)
		write("%s: %s%s\n" %(ts, subzone, ' dst' if subzone.is_dst else ''))

	if not zone.transitions:
		for subzone in zone.subzones:
			write("%s%s\n" %(subzone, ' dst' if subzone.is_dst else ''))

def main(inv=sys.argv):
	args = inv[1:]
	if not args:
		zone = libzone.host_default()
	elif os.path.isabs(args[0]):
		zone = views.Zone(args[0])
	else:
		zone = views.Zone(os.path.join(tzif.tzdir, args[0]), args[0])

	try:
		print_zone_transitions(zone)
	except core.InvalidTimezoneFile as err:
		sys.stderr.write('not a timezone information file: ' + str(err) + '\n')
		return 1
	except OSError as err:
		sys.stderr.write('cannot read zone: ' + str(err) + '\n')
		return 1
	return 0

if __name__ == '__main__':
	sys.exit(main())
