# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from swift_sdk import Session, SwiftClient
from swift_sdk.client.exceptions import RequestError
from swift_sdk.client.types import CopyOpts, CreateOpts, DeleteOpts, DownloadOpts, GetOpts, ListOpts, UpdateOpts
import os
import uuid

def main():
    # Tokens come from a provider instead of a static value
    session = Session(
        storage_url=os.environ["SWIFT_STORAGE_URL"],
        token_provider=lambda: os.environ["SWIFT_AUTH_TOKEN"],
        timeout=10.0,
    )

    with SwiftClient(session) as client:
        source = "my-source-container"
        destination = "my-destination-container"
        name = f"report-{uuid.uuid4()}.csv"

        # Upload a file with metadata, streaming it from disk
        with open("large_file.dat", "wb") as f:
            f.write(b"Sample data for large file upload." * 1024)
        try:
            with open("large_file.dat", "rb") as f:
                client.create_object(CreateOpts(
                    container=source,
                    name=name,
                    content=f,
                    metadata={"Owner": "analytics"},
                    headers={"Content-Type": "text/csv"},
                ))
        finally:
            os.remove("large_file.dat")

        # Ranged GET request
        partial = client.download_object(DownloadOpts(
            container=source,
            name=name,
            headers={"Range": "bytes=0-99"},
        ))
        print(f"Ranged GET returned {len(partial.content)} bytes")

        # Replace the metadata
        client.update_object(UpdateOpts(container=source, name=name, metadata={"Owner": "finance"}))
        print(f"Metadata: {client.get_object(GetOpts(container=source, name=name)).metadata()}")

        # Copy the object to another container
        try:
            client.copy_object(CopyOpts(
                container=source,
                name=name,
                new_container=destination,
                new_name=name,
            ))
            print("Successfully copied object")
        except RequestError as e:
            print(f"Failed to copy object: {e}")

        # List with filtering, as a structured listing
        listing = client.list_objects(ListOpts(container=destination, full=True, params={"prefix": "report-"}))
        print(f"Listing ({listing.header('Content-Type')}): {listing.text}")

        for container in (source, destination):
            try:
                client.delete_object(DeleteOpts(container=container, name=name))
            except RequestError as e:
                print(f"Failed to delete object: {e}")

if __name__ == "__main__":
    main()
