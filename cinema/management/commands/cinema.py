import logging
import sys

from django.core.management.base import BaseCommand

from cinema.handlers import MenuHandler
from cinema.services import TheatreService
from cinema.stores import InMemoryTheatreStore

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Runs the interactive cinema menu: show seats, buy tickets, statistics'
    stealth_options = ('stdin',)

    def handle(self, *args, **options):
        stdin = options.get('stdin') or sys.stdin
        service = TheatreService(InMemoryTheatreStore())

        logger.debug("Starting cinema menu")
        try:
            MenuHandler(service, stdin=stdin, stdout=self.stdout).run()
        except KeyboardInterrupt:
            self.stdout.write(self.style.WARNING('\nCinema menu stopped manually.'))
