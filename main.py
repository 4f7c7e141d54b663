from stepsorter.session import main

if __name__ == "__main__":
    main()
