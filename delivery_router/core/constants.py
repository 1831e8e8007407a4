
# Shortest path algorithms
ALGORITHM_FLOYD_WARSHALL = 'floyd_warshall'
ALGORITHM_DIJKSTRA = 'dijkstra'
DEFAULT_SHORTEST_PATH_ALGORITHM = ALGORITHM_FLOYD_WARSHALL

# Marker in the next-hop matrix for "no next hop recorded"
NO_NEXT_HOP = -1

# --- Unreachable hop handling ---
# 'skip': unreachable hops add nothing to the total distance or the full path.
# 'fail': a tour with any unreachable hop is reported as an error.
UNREACHABLE_POLICY_SKIP = 'skip'
UNREACHABLE_POLICY_FAIL = 'fail'
DEFAULT_UNREACHABLE_POLICY = UNREACHABLE_POLICY_SKIP
UNREACHABLE_POLICIES = (UNREACHABLE_POLICY_SKIP, UNREACHABLE_POLICY_FAIL)

# Result statuses
STATUS_SUCCESS = 'success'
STATUS_ERROR = 'error'

# Tolerance used when comparing floating-point distances
DISTANCE_TOLERANCE = 1e-9

# Unit used in human-readable summaries
DISTANCE_UNIT = 'km'
