# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from swift_sdk import SwiftClient
from swift_sdk.client.types import CreateOpts, DeleteOpts, DownloadOpts, GetOpts, ListOpts
import uuid

def main():
    # Create a new client from SWIFT_* environment variables
    client = SwiftClient()

    try:
        container = "my-test-container"
        name = f"hello-{uuid.uuid4()}.txt"

        # Upload an object
        client.create_object(CreateOpts(container=container, name=name, content=b"Hello, World!"))
        print(f"Uploaded object: {name}")

        # Get object metadata
        head = client.get_object(GetOpts(container=container, name=name))
        print(f"Object size: {head.header('Content-Length')} bytes")
        print(f"Last modified: {head.header('Last-Modified')}")

        # Download the object
        downloaded = client.download_object(DownloadOpts(container=container, name=name))
        print(f"Downloaded content: {downloaded.text}")

        # List objects in the container
        listing = client.list_objects(ListOpts(container=container))
        print("Objects in container:")
        for obj in listing.text.splitlines():
            print(f"- {obj}")

        # Delete the object
        client.delete_object(DeleteOpts(container=container, name=name))
        print(f"Deleted object: {name}")

    finally:
        client.close()

if __name__ == "__main__":
    main()
