from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("Jane", "Doe", "jane.doe@example.com"),
    ("John", "Doe", "john.doe@example.com"),
    ("Ada", "Lovelace", "ada@example.com"),
    ("Alan", "Turing", "alan@example.com"),
    ("Grace", "Hopper", "grace@example.com"),
    ("Jane", "Austen", "jane.austen@example.com"),
]


class Command(BaseCommand):
    help = "Seed database with development customers."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete every existing customer before seeding.",
        )

    def handle(self, *args, **options):
        if options["reset"]:
            deleted, _ = Customer.objects.all().delete()
            self.stdout.write(f"Removed {deleted} existing customers.")

        service = CustomerService(repository=CustomerDjangoRepository())
        created = 0
        for first_name, last_name, email in SEED_CUSTOMERS:
            if service.find_by_first_name_and_last_name(first_name, last_name):
                continue
            service.save(
                Customer(first_name=first_name, last_name=last_name, email=email)
            )
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: customers={created}, "
                f"total={len(service.find_all())}"
            )
        )
