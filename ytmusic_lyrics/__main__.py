from ytmusic_lyrics.cli import main

main()
