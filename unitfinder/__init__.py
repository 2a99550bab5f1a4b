"""unitfinder: search Arch Linux packages and systemd unit files through a credential-injecting gateway."""
