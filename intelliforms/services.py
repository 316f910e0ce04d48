from dataclasses import dataclass

from intelliforms.config.settings import Settings
from intelliforms.extraction.extractor import TextExtractor
from intelliforms.extraction.factory import ReaderFactory
from intelliforms.generation.base import BaseFormGenerator
from intelliforms.generation.factory import GeneratorFactory
from intelliforms.messaging.factory import PublisherFactory
from intelliforms.pipeline.processor import build_processor
from intelliforms.storage.factory import BlobStoreFactory
from intelliforms.templates.catalog import TemplateCatalog
from intelliforms.uploads.issuer import SignedUrlIssuer
from intelliforms.uploads.notifier import UploadNotifier
from intelliforms.worker.message_handler import MessageHandler


@dataclass(frozen=True)
class Services:
    """Process-wide service objects, built once at start-up and injected."""

    settings: Settings
    issuer: SignedUrlIssuer
    notifier: UploadNotifier
    extractor: TextExtractor
    generator: BaseFormGenerator
    sample_generator: BaseFormGenerator
    message_handler: MessageHandler
    templates: TemplateCatalog


def build_services(settings: Settings) -> Services:
    """Construct every external client once and wire the services."""
    blob_store = BlobStoreFactory.create(settings)
    extractor = TextExtractor(blob_store, ReaderFactory.create(settings))
    generator = GeneratorFactory.create(settings)
    processor = build_processor(settings, extractor, generator)
    message_handler = MessageHandler(processor)
    publisher = PublisherFactory.create(settings, inline_handler=message_handler.handle)
    return Services(
        settings=settings,
        issuer=SignedUrlIssuer(
            blob_store,
            bucket_name=settings.bucket_name,
            expiration_minutes=settings.signed_url_expiration_minutes,
        ),
        notifier=UploadNotifier(
            publisher,
            topic=settings.pubsub_topic,
            bucket_name=settings.bucket_name,
        ),
        extractor=extractor,
        generator=generator,
        sample_generator=GeneratorFactory.create_example(),
        message_handler=message_handler,
        templates=TemplateCatalog(settings.templates_dir),
    )
