from django.core.management.base import BaseCommand, CommandError

from delivery_router.core.constants import ALGORITHM_DIJKSTRA, ALGORITHM_FLOYD_WARSHALL
from delivery_router.core.exceptions import GraphFormatError
from delivery_router.core.shortest_paths import get_path_finder
from delivery_router.services.graph_loader_service import GraphLoaderService
from delivery_router.services.route_summary_service import RouteSummaryService
from delivery_router.services.tour_service import DeliveryTourService
from delivery_router.settings import get_router_setting
from delivery_router.utils.helpers import parse_delivery_points, safe_json_dumps


class Command(BaseCommand):
    help = 'Compute a nearest-neighbor delivery tour over the city graph'

    def add_arguments(self, parser):
        parser.add_argument('--start', required=True, help='ID of the city the tour starts and ends at')
        parser.add_argument('--stops', default='[]', help='JSON list of delivery city IDs, e.g. \'["2", "5"]\'')
        parser.add_argument('--graph', help='Edge-list file (defaults to ROUTER_GRAPH_FILE)')
        parser.add_argument('--names', help='City names file (defaults to ROUTER_CITY_NAMES_FILE)')
        parser.add_argument(
            '--algorithm', choices=[ALGORITHM_FLOYD_WARSHALL, ALGORITHM_DIJKSTRA],
            help='All-pairs shortest path algorithm (defaults to ROUTER_SHORTEST_PATH_ALGORITHM)'
        )
        parser.add_argument('--json', action='store_true', help='Print the full result as JSON')

    def handle(self, *args, **options):
        graph_file = options['graph'] or get_router_setting('ROUTER_GRAPH_FILE')
        try:
            graph = GraphLoaderService.load_graph(graph_file)
        except FileNotFoundError as e:
            raise CommandError(f"Graph file not found: {graph_file}") from e
        except GraphFormatError as e:
            raise CommandError(f"Graph file {graph_file} is malformed: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CommandError(f"Graph file {graph_file} could not be read: {e}") from e

        city_names = GraphLoaderService.load_city_names(
            options['names'] or get_router_setting('ROUTER_CITY_NAMES_FILE')
        )
        service = DeliveryTourService(
            path_finder=get_path_finder(options['algorithm'] or get_router_setting('ROUTER_SHORTEST_PATH_ALGORITHM')),
            unreachable_policy=get_router_setting('ROUTER_UNREACHABLE_POLICY')
        )
        result = service.plan_tour(graph, options['start'], parse_delivery_points(options['stops']))

        if not result.is_success:
            raise CommandError(result.error)

        RouteSummaryService.add_statistics(result, graph)
        if options['json']:
            self.stdout.write(safe_json_dumps(result.to_dict()))
        else:
            self.stdout.write(self.style.SUCCESS(RouteSummaryService.build_summary(result, city_names)))
