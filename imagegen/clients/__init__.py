"""Provider clients. One module per external API."""
