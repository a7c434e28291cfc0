from userfiles.cli import main

main()
